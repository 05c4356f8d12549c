"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quicklearn.api.routes import categories, courses, learning_path, lessons, progress, roadmaps
from quicklearn.core.auth import get_auth_user
from quicklearn.core.config import get_settings
from quicklearn.core.database import close_db, get_db_session, init_db
from quicklearn.core.exceptions import QuickLearnError
from quicklearn.core.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)
from quicklearn.services import user_service

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    configure_logging(debug=settings.DEBUG, sql_echo=settings.DATABASE_ECHO)
    logger.info(
        "Starting QuickLearn",
        version=settings.APP_VERSION,
        env=settings.ENV,
        debug=settings.DEBUG,
    )
    await init_db()
    async with get_db_session() as db:
        await user_service.ensure_user(db, settings.DEFAULT_USER_ID)
    yield
    # Shutdown
    logger.info("Shutting down QuickLearn")
    await close_db()


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Roadmaps, courses and lessons with per-user progress tracking",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_log_context(request: Request, call_next):
    """Bind method, path and requester to every log line of the request."""
    bind_request_context(request.method, request.url.path, get_auth_user(request))
    try:
        return await call_next(request)
    finally:
        clear_request_context()


@app.exception_handler(QuickLearnError)
async def quicklearn_error_handler(request: Request, exc: QuickLearnError) -> JSONResponse:
    """Render domain errors as 4xx responses."""
    logger.warning(
        "Request rejected",
        error=exc.kind,
        detail=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


# Include routers
app.include_router(categories.roadmap_categories_router, prefix="/api")
app.include_router(categories.course_categories_router, prefix="/api")
app.include_router(roadmaps.router, prefix="/api")
app.include_router(courses.router, prefix="/api")
app.include_router(lessons.router, prefix="/api")
app.include_router(progress.router, prefix="/api")
app.include_router(learning_path.router, prefix="/api")


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "env": settings.ENV,
    }


@app.get("/ping")
async def ping() -> dict:
    return {"status": "OK"}


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
