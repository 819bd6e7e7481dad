from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from user_api import __version__
from user_api.errors import UserApiError
from user_api.logging_config import configure_logging
from user_api.models import HealthStatus, Message
from user_api.routers.users import router as users_router
from user_api.settings import Settings, get_settings
from user_api.user_store import InMemoryUserStore

logger = logging.getLogger("user_api")

APP_VERSION = __version__


def _plain_error(message: str, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(message + "\n", status_code=status_code)


async def _user_api_error_handler(request: Request, exc: UserApiError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return _plain_error(exc.message, exc.status_code)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    # Malformed or mistyped JSON bodies are plain 400s, not FastAPI's 422 JSON.
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        detail = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        detail = "Invalid request body"
    logger.warning("%s %s invalid body: %s", request.method, request.url.path, detail)
    return _plain_error(f"Invalid JSON: {detail}", 400)


def create_app(store: Optional[InMemoryUserStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicitly owned user store.

    Each call gets its own store unless one is passed in, so tests can run
    several independent instances side by side.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info("Server is running on %s", settings.port)
        yield

    app = FastAPI(title="User API", version=APP_VERSION, lifespan=lifespan)
    app.state.store = store if store is not None else InMemoryUserStore()
    app.state.settings = settings

    app.add_exception_handler(UserApiError, _user_api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(users_router)

    @app.api_route("/api/v1/", methods=["GET", "POST", "PUT", "DELETE"], response_model=Message)
    def root():
        return JSONResponse({"message": "Hello World"})

    @app.get("/healthz", response_model=HealthStatus)
    def healthz(request: Request):
        return JSONResponse(
            HealthStatus(
                ok=True,
                service="user-api",
                version=APP_VERSION,
                users=request.app.state.store.count(),
            ).model_dump()
        )

    return app


# Module-level instance for `uvicorn user_api.main:app`.
app = create_app()


def serve(settings: Optional[Settings] = None) -> None:
    import uvicorn

    settings = settings or get_settings()
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)
