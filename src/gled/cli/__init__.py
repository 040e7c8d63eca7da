"""Command-line interface for gled."""
