"""Presentation layer (FastAPI routers and error handling)."""
