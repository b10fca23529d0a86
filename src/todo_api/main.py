from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .errors import InvalidInputError, NotFoundError, PersistenceError, TodoApiError
from .repositories import build_repository
from .routers import todos as todos_router
from .settings import Settings, get_settings

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items persisted to a JSON file."},
]

_STATUS_BY_ERROR = {
    InvalidInputError: 400,
    NotFoundError: 404,
    PersistenceError: 500,
}

DECODE_TODO = "Failed to decode todo"
DECODE_UPDATES = "Failed to decode updates"


def describe_validation_errors(errors: Any, decode_message: str = DECODE_TODO) -> str:
    """
    Reduce pydantic/fastapi error details to a single plain-text message.

    Malformed JSON, a missing body and values of the wrong JSON type all report
    `decode_message`; validator failures surface the validator's own message.
    """
    messages = []
    for err in errors:
        ctx_error = (err.get("ctx") or {}).get("error")
        if err.get("type") != "value_error" or ctx_error is None:
            return decode_message
        messages.append(str(ctx_error))
    return "; ".join(messages) or decode_message


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The todo store is loaded before the app is returned; a store file that
    cannot be read or parsed raises StartupError.
    """
    settings = settings or get_settings()
    repository = build_repository(settings.todos_file)

    app = FastAPI(
        title="Todo API",
        description="Backend API service for managing todos persisted to a single JSON file.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.repository = repository

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        """
        Malformed JSON and failed field validation are reported as 400 with a
        plain-text message, e.g. "Title is required". The body is only decoded
        when the request is sent with a JSON content type.
        """
        decode_message = DECODE_UPDATES if request.method == "PUT" else DECODE_TODO
        return PlainTextResponse(describe_validation_errors(exc.errors(), decode_message), status_code=400)

    @app.exception_handler(TodoApiError)
    async def todo_exception_handler(request: Request, exc: TodoApiError) -> PlainTextResponse:
        """
        Map domain errors to status codes: InvalidInputError -> 400,
        NotFoundError -> 404, PersistenceError -> 500.
        """
        status_code = next(
            (code for cls, code in _STATUS_BY_ERROR.items() if isinstance(exc, cls)),
            500,
        )
        return PlainTextResponse(exc.message, status_code=status_code)

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"])
    def health_check() -> Dict[str, Any]:
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health, the store file and item count.
        """
        return {
            "message": "Healthy",
            "store": settings.todos_file,
            "count": len(repository.list()),
        }

    app.include_router(todos_router.router)
    return app
