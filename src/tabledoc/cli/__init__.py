"""Command-line interface for tabledoc."""
