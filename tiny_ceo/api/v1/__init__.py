"""API v1 package."""

from .conversations import router as conversations_router
from .agents import router as agents_router

__all__ = ["conversations_router", "agents_router"]
