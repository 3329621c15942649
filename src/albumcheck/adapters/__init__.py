"""Adapters to the remote history and library services."""
