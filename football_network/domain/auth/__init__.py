"""Authentication ports (tokens)."""
