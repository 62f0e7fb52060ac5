from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


PROJECT_ROOT = Path(__file__).resolve().parent
API_CODE_PATH = PROJECT_ROOT / "api-code"
if str(API_CODE_PATH) not in sys.path:
    sys.path.insert(0, str(API_CODE_PATH))

from env_loader import load_local_env, should_load_local_env  # noqa: E402
from errors import register_error_handlers  # noqa: E402
from routers import build_chat_router, build_health_router  # noqa: E402
from services import EchoChatService  # noqa: E402
from settings import Settings, get_settings  # noqa: E402


logger = logging.getLogger("echobot")


def create_app(settings: Settings) -> FastAPI:
    """Build the EchoBot API for the given (immutable) settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("EchoBot Backend server listening on port %s", settings.port)
        logger.info("Environment: %s", settings.app_env)
        yield

    app = FastAPI(
        title="EchoBot Backend",
        version="0.1.0",
        description="Minimal chat-echo API.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    chat_service = EchoChatService()
    app.include_router(build_health_router())
    app.include_router(build_chat_router(chat_service))
    return app


if should_load_local_env():
    load_local_env(PROJECT_ROOT / ".env")
settings = get_settings()

logging.basicConfig(level=settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
