"""Command-line interface for minivcs."""
