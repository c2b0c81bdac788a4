"""
GigConnect - Main Application
FastAPI application entrypoint.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gigconnect.api.routers import health, workers
from gigconnect.api.dependencies import startup_dependencies, shutdown_dependencies
from gigconnect.core.config import settings
from gigconnect.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect to MongoDB on startup and close the pool on shutdown.
    """
    logger.info("Starting GigConnect...")

    try:
        await startup_dependencies()
        logger.info(f"✓ API Server: http://{settings.API_HOST}:{settings.API_PORT}")
        logger.info(f"✓ Swagger UI: http://{settings.API_HOST}:{settings.API_PORT}/docs")
    except Exception as e:
        logger.opt(exception=e).critical(f"Failed to start application: {e}")
        raise

    yield

    logger.info("Shutting down GigConnect...")
    try:
        await shutdown_dependencies()
        logger.info("✓ GigConnect shutdown complete")
    except Exception as e:
        logger.opt(exception=e).error(f"Error during shutdown: {e}")


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description="Marketplace API connecting clients with service professionals.",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(workers.router)


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.opt(exception=exc).error(f"Unhandled exception for request {request.method} {request.url}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal server error",
            "detail": str(exc) if settings.LOG_LEVEL == "DEBUG" else "An unexpected error occurred."
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
