"""Command line interface for recordkit."""
