"""Command line interface for the Hangul number codec."""
