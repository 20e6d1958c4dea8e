"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from files_manager.config import settings
from files_manager.database import engine, init_db, ping_db
from files_manager.schemas.base import ErrorResponse
from files_manager.services.exceptions import FilesError
from files_manager.services.session_store import create_redis_client

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and open the session store connection on startup."""
    await init_db()

    app.state.redis = create_redis_client(settings.REDIS_URL)
    logger.info("Files manager started (storage root %s)", settings.FOLDER_PATH)

    yield

    # Cleanup
    await app.state.redis.aclose()
    await engine.dispose()


app = FastAPI(
    title="Files Manager API",
    version="1.0.0",
    description="File storage with owner-scoped access control.",
    lifespan=lifespan,
)

# CORS
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FilesError)
async def files_error_handler(request: Request, exc: FilesError):
    """Render every files-core error as {"error": message}."""
    logger.info(
        "%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )


@app.get("/health")
async def health_check():
    """Verify API, database and session store connectivity."""
    status = {"status": "ok", "database": "connected", "redis": "connected"}
    try:
        await ping_db()
    except Exception as e:
        status.update(status="error", database=str(e))
    try:
        await app.state.redis.ping()
    except Exception as e:
        status.update(status="error", redis=str(e))
    return status


# Register routers
from files_manager.routes.files import router as files_router
app.include_router(files_router)
