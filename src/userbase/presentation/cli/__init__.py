"""Command-line interface for Userbase."""
