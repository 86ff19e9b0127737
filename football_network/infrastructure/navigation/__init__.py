"""Navigation adapters."""
