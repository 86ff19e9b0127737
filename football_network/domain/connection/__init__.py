"""Connection bounded context (relations between clubs)."""
