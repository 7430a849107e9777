"""Command line interface for Quoth."""
