"""Command line interface for secexpr."""
