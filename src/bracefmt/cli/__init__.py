"""Command-line interface for bracefmt."""
