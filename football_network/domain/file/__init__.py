"""Uploaded file bounded context."""
