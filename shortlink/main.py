from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shortlink.core.config import settings
from shortlink.core.logging_config import configure_logging
from shortlink.db.Connection import database
from shortlink.db.Models import models
from shortlink.api import health, shortener

logger = configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    if not database.verify_database_connection():
        raise RuntimeError("Database is unreachable, refusing to start")
    models.Base.metadata.create_all(bind=database.engine)
    logger.info("Database models initialized/checked.")
    yield
    logger.info("Shutting down gracefully...")
    database.engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="URL shortening service with click tracking",
    lifespan=lifespan,
)

# health routes first so /health and /ready are not taken for slugs
app.include_router(health.router)
app.include_router(shortener.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request body"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
