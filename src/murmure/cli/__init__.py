"""Command-line interface for Murmure webhooks."""
