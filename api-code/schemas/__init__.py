from .chat import ChatRequest, ChatResponse, ErrorResponse, HealthResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
]
