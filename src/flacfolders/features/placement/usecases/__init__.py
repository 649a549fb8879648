"""Placement use cases."""
