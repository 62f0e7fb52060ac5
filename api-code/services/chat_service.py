from __future__ import annotations

import logging
from typing import Any

from errors import ChatValidationError


logger = logging.getLogger("echobot.chat")

ECHO_PREFIX = "EchoBot received: "


class EchoChatService:
    """Stateless echo bot: replies with the trimmed user message behind a fixed prefix."""

    def __init__(self, prefix: str = ECHO_PREFIX):
        self.prefix = prefix

    async def generate_reply(self, message: Any) -> str:
        if not isinstance(message, str) or not message.strip():
            logger.warning("Received bad request: Missing or empty message parameter.")
            raise ChatValidationError()

        reply = self.echo(message)
        logger.info('Received message: "%s" - Responding with: "%s"', message, reply)
        return reply

    def echo(self, message: str) -> str:
        return f"{self.prefix}{message.strip()}"
