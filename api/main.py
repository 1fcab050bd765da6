"""
FastAPI application for LinguaBridge.
"""

from contextlib import AsyncExitStack, asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from api.routes import translate
from config import Settings, load_settings, build_async_remote, build_translator
from health import get_health
from logger import setup_logging, get_logger
from validators import InvalidRequest
import os


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Settings to use (loaded from LINGUABRIDGE_CONFIG and env if None)

    Returns:
        FastAPI app
    """
    if settings is None:
        settings = load_settings(os.getenv("LINGUABRIDGE_CONFIG"))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger = get_logger("api")
        async with AsyncExitStack() as stack:
            async_remote = build_async_remote(settings)
            if async_remote is not None:
                await stack.enter_async_context(async_remote)
            app.state.translator = build_translator(settings, async_remote=async_remote)
            logger.info(f"Translator ready (provider={settings.provider}, offline={settings.offline})")

            yield

        logger.info("Translator shut down")

    app = FastAPI(
        title="LinguaBridge API",
        description="Text translation with offline fallback",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(request: Request, exc: InvalidRequest):
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "detail": str(exc)}
        )

    app.include_router(translate.router, prefix="/api/v1", tags=["translate"])

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "LinguaBridge API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "translate": "/api/v1/translate",
                "languages": "/api/v1/languages"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return get_health()

    return app


if __name__ == "__main__":
    import uvicorn

    settings = load_settings(os.getenv("LINGUABRIDGE_CONFIG"))
    setup_logging(log_file=settings.log_file, log_level=settings.log_level, json_format=settings.json_logs)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
