"""FastAPI application entry point.

Deal Feed API - grocery deals feed with shared shopping lists.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from dealfeed.routes import api_router
from dealfeed.schemas import error_body
from dealfeed.services.seed import seed_demo_data
from dealfeed.settings import get_settings
from dealfeed.stores.memory import close_storage, init_storage

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    The store lives exactly as long as the process: it is created (and
    optionally seeded) on startup and dropped on shutdown.
    """
    settings = get_settings()

    storage = init_storage()
    if settings.seed_demo_data:
        seed_demo_data(storage)

    yield

    close_storage()
    logger.info("In-memory store closed")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Grocery deals feed with shared shopping lists",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def structured_http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """Send ``{"error": {...}}`` bodies as-is; other HTTP errors keep FastAPI's shape."""
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_body(
                "INTERNAL_ERROR",
                str(exc) if settings.debug else "Internal server error",
            ),
        )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dealfeed.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
