"""Club management use cases."""
