"""Club network graph read model."""
