"""Create and redirect routes served at the root path."""

from .routes import router as web_router

__all__ = ["web_router"]
