from __future__ import annotations

import logging

from fastapi import APIRouter, status

from errors import EchoBotError, InternalServerError
from schemas import ChatRequest, ChatResponse, ErrorResponse
from services import EchoChatService


logger = logging.getLogger("echobot.chat")


def build_chat_router(chat_service: EchoChatService) -> APIRouter:
    """Create the chat router wired to the provided chat service."""
    router = APIRouter(prefix="/api", tags=["chat"])

    @router.post(
        "/chat",
        response_model=ChatResponse,
        status_code=status.HTTP_200_OK,
        summary="Echo the user's message back with the EchoBot prefix.",
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        },
    )
    async def chat_endpoint(payload: ChatRequest) -> ChatResponse:
        try:
            reply = await chat_service.generate_reply(payload.message)
        except EchoBotError:
            raise
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Error processing chat message: %s", exc)
            raise InternalServerError() from exc

        return ChatResponse(bot_message=reply)

    return router
