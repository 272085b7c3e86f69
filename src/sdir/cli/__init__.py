"""Command-line interface package for sdir."""
