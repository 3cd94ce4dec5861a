"""Render use cases and sink ports."""
