"""Route guards and navigation resolution for the admin frontend."""
