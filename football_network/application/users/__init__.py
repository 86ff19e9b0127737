"""User administration use cases."""
