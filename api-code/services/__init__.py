from .chat_service import ECHO_PREFIX, EchoChatService

__all__ = ["ECHO_PREFIX", "EchoChatService"]
