"""Segment domain objects."""
