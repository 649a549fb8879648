"""Placement domain helpers."""
