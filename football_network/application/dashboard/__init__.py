"""Dashboard statistics."""
