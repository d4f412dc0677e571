from __future__ import annotations

from fastapi import FastAPI

from app.analysis.router import router as analysis_router
from app.api.exception_handlers import register_exception_handlers
from app.api.schemas import HealthOut
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.core.settings import get_settings

setup_logging(get_settings().log_level)


def create_app() -> FastAPI:
    # Only process-level settings are read here; the LLM credential is resolved
    # per request (see app.analysis.deps), so a missing key never blocks startup.
    settings = get_settings()
    app = FastAPI(
        debug=settings.is_development,
        title="Mood Analysis API",
        description=(
            "Stateless proxy that turns a user's mood, sleep, habit and observation history "
            "into an LLM prompt and returns the model's analysis.\n\n"
            "Design principles:\n"
            "- Nothing is persisted; each call is one prompt and one LLM request.\n"
            "- Logs and metrics carry metadata only, never wellness data or model output.\n"
            "- `/analyzeMood` is callable without authentication."
        ),
        docs_url="/swagger",
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "analysis",
                "description": "LLM analysis of mood, sleep, habits and observations.",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Lightweight endpoint to verify the API process is running.\n\n"
            "It does not call the LLM service, so it is free to poll."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(analysis_router)
    return app


app = create_app()
