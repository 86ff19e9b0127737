"""Connection management use cases."""
