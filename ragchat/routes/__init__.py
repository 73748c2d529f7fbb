"""FastAPI routes package."""

from ragchat.routes.chat import router as chat_router
from ragchat.routes.health import router as health_router

__all__ = ["chat_router", "health_router"]
