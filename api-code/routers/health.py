from __future__ import annotations

from fastapi import APIRouter

from schemas import HealthResponse


HEALTH_MESSAGE = "EchoBot Backend is running!"


def build_health_router() -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.api_route("/", methods=["GET", "HEAD"], response_model=HealthResponse)
    async def healthcheck() -> HealthResponse:
        return HealthResponse(message=HEALTH_MESSAGE)

    return router
