from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, StrictStr


class ChatRequest(BaseModel):
    message: Optional[StrictStr] = Field(
        default=None, description="User message to echo back. Must not be blank."
    )


class ChatResponse(BaseModel):
    bot_message: str = Field(
        ..., alias="botMessage", description="EchoBot reply derived from the message."
    )

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable failure description.")


class HealthResponse(BaseModel):
    message: str = Field(..., description="Liveness message.")
