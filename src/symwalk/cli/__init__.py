"""Command-line interface for symwalk."""
