"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shortlink.errors import ShortlinkError, MalformedInput, status_code_for, error_body
from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def register_error_handlers(app: FastAPI) -> None:
    """Map core errors and request validation failures to JSON responses."""

    @app.exception_handler(ShortlinkError)
    async def shortlink_error_handler(request: Request, exc: ShortlinkError):
        return JSONResponse(status_code=status_code_for(exc), content=error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0]["msg"] if errors else "invalid payload"
        error = MalformedInput(f"Error parsing json: {detail}")
        return JSONResponse(status_code=status_code_for(error), content=error_body(error))


def create_app(
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: ShortlinkService instance (None when set by lifespan)
        config: Configuration instance
        logger: Optional application logger

    Returns:
        Configured FastAPI app
    """
    logger = logger or logging.getLogger("shortlink")

    app = FastAPI(
        title="Shortlink",
        description="Short slugs for long URLs, with usage counting",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    app.state.logger = logger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        ForwardedHeadersMiddleware,
        trust_forwarded=config.trust_forwarded_for,
    )
    app.add_middleware(LoggingMiddleware, logger=logger.getChild("web"))

    register_error_handlers(app)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
