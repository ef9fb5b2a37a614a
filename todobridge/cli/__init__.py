"""Command-line interface for the todo bridge."""
