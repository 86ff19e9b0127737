"""Ports shared across bounded contexts."""
