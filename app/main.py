import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.errors import register_exception_handlers
from app.api.exercise_tracker import router as exercise_tracker_router
from app.config.settings import settings
from app.core.logger import setup_logger
from app.db.session import init_db

setup_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Create tables and check the database before serving requests.

    A database that cannot be reached aborts startup.
    """
    init_db()
    logger.info("Database ready")

    await asyncio.sleep(0)
    yield

    logger.info("Exercise tracker shutting down")


def create_app() -> FastAPI:
    app = FastAPI(title="Exercise Tracker", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(exercise_tracker_router)
    register_exception_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests."""
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
        return response

    logger.info("FastAPI application initialized")
    return app


app = create_app()
