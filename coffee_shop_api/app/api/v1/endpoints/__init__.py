"""Domain-specific route modules for API v1."""
