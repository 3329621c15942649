"""Domain types and services for reconciling listening history with a library."""
