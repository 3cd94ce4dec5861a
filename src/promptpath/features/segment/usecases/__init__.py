"""Segment use case ports."""
