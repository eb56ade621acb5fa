"""HTTP API routers."""

from music_manager.api.router import api_router

__all__ = ["api_router"]
