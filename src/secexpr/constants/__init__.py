"""Shared constants for secexpr."""
