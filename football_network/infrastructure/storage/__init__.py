"""Binary file storage adapters."""
