"""Application layer for identity management."""
