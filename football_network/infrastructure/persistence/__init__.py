"""Repository adapters (in-memory and MongoDB) and their factory."""
