"""Command-line interface for the application generator."""
