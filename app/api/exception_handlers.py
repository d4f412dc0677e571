from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.exceptions import BusinessValidationError, ConfigurationError, UpstreamError

logger = logging.getLogger("app.business_validation")


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(BusinessValidationError)
    async def handle_business_validation_error(
        request: Request,
        exc: BusinessValidationError,
    ) -> JSONResponse:
        # IMPORTANT: do not log request bodies; they contain wellness data.
        logger.info(
            "Business validation failed",
            extra={
                "request_id": _request_id(request),
                "http_method": request.method,
                "request_path": request.url.path,  # no query string
                "status_code": 400,
                "error": "business_validation",
            },
        )
        return JSONResponse(status_code=400, content={"detail": exc.message})

    # Analysis failures are logged by the service; handlers only map them to responses.
    @app.exception_handler(ConfigurationError)
    async def handle_configuration_error(
        request: Request,
        exc: ConfigurationError,
    ) -> JSONResponse:
        return JSONResponse(status_code=503, content={"detail": exc.message})

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(
        request: Request,
        exc: UpstreamError,
    ) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": exc.message})
