"""Presentation layer (HTTP transport)."""
