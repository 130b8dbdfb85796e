"""Soil advisor service entrypoint."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from shared.logging import configure_logging, get_logger
from shared.middleware import RequestIdMiddleware
from shared.schemas import HealthResponse

from soil_advisor import __version__
from soil_advisor.api.routes import router
from soil_advisor.api.schemas import ErrorResponse
from soil_advisor.clients import CompletionClient, GeminiClient
from soil_advisor.config import SoilAdvisorSettings
from soil_advisor.errors import (
    INTERNAL_ERROR,
    RATE_LIMIT_ERROR,
    SoilAdvisorError,
    UpstreamRateLimitError,
    ValidationError,
)
from soil_advisor.service import AnalysisService

SERVICE_NAME = "soil-advisor"

_settings: SoilAdvisorSettings | None = None

logger = get_logger(__name__)


def get_settings() -> SoilAdvisorSettings:
    global _settings
    if _settings is None:
        _settings = SoilAdvisorSettings()
    return _settings


def error_body(exc: SoilAdvisorError) -> ErrorResponse:
    if isinstance(exc, ValidationError):
        return ErrorResponse(error=exc.message, message=exc.detail)
    if isinstance(exc, UpstreamRateLimitError):
        return ErrorResponse(error=RATE_LIMIT_ERROR, message=exc.quota_message)
    return ErrorResponse(error=INTERNAL_ERROR, message=exc.message)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: SoilAdvisorSettings = app.state.settings
    client: CompletionClient | None = app.state.completion_client
    if client is None:
        client = GeminiClient(
            api_key=settings.gemini_api_key,
            timeout=settings.upstream_timeout_seconds,
        )
    app.state.analysis_service = AnalysisService(client)
    if not settings.gemini_api_key:
        logger.warning("gemini_api_key_missing")
    logger.info(
        "server_started",
        port=settings.port,
        analyze_url=f"http://localhost:{settings.port}/analyze-soil",
    )
    yield


def create_app(
    settings: SoilAdvisorSettings | None = None,
    completion_client: CompletionClient | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs, service=SERVICE_NAME)
    app = FastAPI(title="Soil Advisor", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.completion_client = completion_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    @app.exception_handler(SoilAdvisorError)
    async def _soil_advisor_error(request: Request, exc: SoilAdvisorError) -> JSONResponse:
        body = error_body(exc)
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_exception", path=request.url.path)
        body = ErrorResponse(error=INTERNAL_ERROR, message=str(exc))
        return JSONResponse(status_code=500, content=body.model_dump())

    app.include_router(router)

    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service=SERVICE_NAME)

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        if not settings.gemini_api_key:
            return HealthResponse(
                status="degraded",
                service=SERVICE_NAME,
                detail="GEMINI_API_KEY is not set",
            )
        return HealthResponse(status="ok", service=SERVICE_NAME)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "soil_advisor.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
