"""FastAPI application entry point.

Catalog Rails API - product listings and homepage rails.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.routes import api_router
from catalog_api.schemas import ErrorResponse
from catalog_api.services.catalog import CatalogQueryError
from catalog_api.settings import get_settings
from catalog_api.stores.postgres import init_db, close_db, ping_db

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup (a failed ping is logged, not fatal)
    await init_db()
    try:
        await ping_db()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres ping failed")

    yield

    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Read-only catalog: product listings, categories and homepage rails",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogQueryError)
    async def catalog_query_error_handler(request: Request, exc: CatalogQueryError) -> JSONResponse:
        """Storage-backed read failed."""
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=exc.message, detail=exc.detail).model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Flatten HTTP errors to {"error": str}.

        Unknown routes and known paths hit with an unsupported method both
        answer 404 with a fixed message.
        """
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
        message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=getattr(exc, "headers", None),
        )

    # Exception handler for anything else
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal server error",
                detail=str(exc) if settings.debug else None,
            ).model_dump(),
        )

    @app.get("/", tags=["health"])
    async def root() -> dict[str, str]:
        """Root endpoint: liveness message."""
        return {"message": f"{settings.app_name} server is running"}

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
