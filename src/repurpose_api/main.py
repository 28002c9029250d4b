"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import requests
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from openai import OpenAI
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.cli_helpers import setup_logging
from common.errors import ExtractionError, FetchError, GenerationError
from repurpose_api.routers import health, repurpose
from repurpose_api.services.repurpose_service import RepurposeService
from repurpose_content.clients import build_http_session, build_llm_client
from repurpose_content.config import AppConfig, get_config

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

ERROR_STATUS_CODES = {
    ExtractionError: 400,
    FetchError: 502,
    GenerationError: 502,
}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _register_exception_handlers(app: FastAPI) -> None:
    async def handle_pipeline_error(request: Request, exc: Exception) -> JSONResponse:
        status_code = next(
            code for error_type, code in ERROR_STATUS_CODES.items() if isinstance(exc, error_type)
        )
        logger.error("Error processing request: %s", exc)
        return _error_response(status_code, str(exc))

    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail))

    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected malformed request body: %s", exc.errors())
        return _error_response(400, "Request body must be a JSON object with a 'url' string")

    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error processing request")
        return _error_response(500, "Internal server error")

    for error_type in ERROR_STATUS_CODES:
        app.add_exception_handler(error_type, handle_pipeline_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def create_app(
    config: AppConfig | None = None,
    session: requests.Session | None = None,
    llm_client: OpenAI | None = None,
) -> FastAPI:
    """Build the API with its outbound clients.

    Clients default to ones built from config; pass them in to run without
    a live network.
    """
    config = config or get_config()
    service = RepurposeService(
        config,
        session=session or build_http_session(config),
        llm_client=llm_client or build_llm_client(config),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        service.close()

    app = FastAPI(
        title="Article Repurposer",
        description="Turn a blog post URL into a thread, a long-form post and key takeaways",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.repurpose_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(repurpose.router)

    @app.get("/")
    async def root():
        """API root - returns basic info."""
        return {
            "name": "Article Repurposer",
            "version": API_VERSION,
            "docs": "/docs",
        }

    return app


def main():
    """Run the API server."""
    import uvicorn

    setup_logging()
    config = get_config()
    logger.info("Starting server on port %d", config.server.port)
    logger.info("Health check: http://localhost:%d/health", config.server.port)

    uvicorn.run(
        "repurpose_api.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
