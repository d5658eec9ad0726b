# Main application entry point
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, health_router, notes_router, sharing_router
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.schemas.common import ErrorResponse
from .database import Database, DatabaseNotInitializedError

logger = get_logger("main")

GREETING = "Hello, this is the Note App!"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            message="Invalid request body", errors=jsonable_encoder(exc.errors())
        ).model_dump(),
    )


async def database_exception_handler(
    request: Request, exc: DatabaseNotInitializedError
) -> JSONResponse:
    logger.error("Request reached an uninitialized database", exc_info=exc, extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": "Server error"}
    )


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application. The database connects before requests are served."""
    settings = settings or get_settings()
    database = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            "Starting Notebox application",
            extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
        )

        if not database.is_connected:
            await database.connect()

        yield

        logger.info("Shutting down Notebox application")
        await database.close()

    app = FastAPI(
        title=settings.app_name,
        description="Note taking and sharing API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DatabaseNotInitializedError, database_exception_handler)

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")
    app.include_router(sharing_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    # Root endpoint
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return GREETING

    # Static files last so they never shadow an API route
    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir), name="public")
    else:
        logger.warning("Static directory not found, skipping", extra={"public_dir": str(public_dir)})

    return app


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "notebox.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


# Setup logging first
setup_logging()

app = create_app()


if __name__ == "__main__":
    run()
