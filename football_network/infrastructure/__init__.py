"""Adapters for the domain ports (persistence, cache, auth, storage)."""
