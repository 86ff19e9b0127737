"""Stored file administration."""
