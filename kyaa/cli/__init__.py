"""Command-line entry points for kyaa."""
