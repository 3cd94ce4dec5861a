"""Render domain objects."""
