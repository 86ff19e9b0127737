"""Authentication use cases (login, tokens, logout)."""
