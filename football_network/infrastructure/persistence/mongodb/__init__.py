"""MongoDB repositories (motor)."""
