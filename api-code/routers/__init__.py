from .chat import build_chat_router
from .health import HEALTH_MESSAGE, build_health_router

__all__ = ["HEALTH_MESSAGE", "build_chat_router", "build_health_router"]
