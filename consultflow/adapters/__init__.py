"""Command-line adapters for the reporting core."""
