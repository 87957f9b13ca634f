"""Infrastructure adapters (security, persistence, email, logging)."""
