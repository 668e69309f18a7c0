"""Command-line interface for lintbaseline."""
