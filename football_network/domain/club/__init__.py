"""Club bounded context."""
