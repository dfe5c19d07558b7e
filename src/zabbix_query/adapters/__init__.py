"""Adapters implementing core ports and exposing the core."""
