"""Userbase - starter backend for user registration and token authentication."""

__version__ = "1.0.0"
