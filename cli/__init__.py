"""Command-line interface for the blog summariser."""
