"""Command-line interface for scorekeeper."""
