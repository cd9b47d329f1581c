"""Command-line interface for eventledger."""
