"""Core terminal utilities."""
