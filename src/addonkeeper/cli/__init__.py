"""Command-line interface for addonkeeper."""
