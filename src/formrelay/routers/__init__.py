"""API routers package."""
