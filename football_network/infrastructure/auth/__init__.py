"""Authentication adapters (JWT, password hashing, HTTP middleware)."""
