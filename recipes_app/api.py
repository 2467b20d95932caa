"""FastAPI application creation and configuration."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings, get_settings
from .database.session import init_sample_data
from .database.store import RecipeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager: seed the store on startup, log shutdown."""
    settings = app.state.settings
    if settings.SEED_SAMPLE_DATA:
        init_sample_data(app.state.store)
    logger.info("%s started with %d recipes", settings.APP_NAME, len(app.state.store))
    yield
    logger.info("%s shutting down", settings.APP_NAME)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed payloads as 400 instead of FastAPI's default 422."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(settings: Optional[Settings] = None, store: Optional[RecipeStore] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Each call gets its own store unless one is passed in, so tests never share state.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store if store is not None else RecipeStore()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/")
    def root(request: Request):
        return {
            "status": "ok",
            "message": f"{settings.APP_NAME} running",
            "recipes": len(request.app.state.store),
        }

    # Include routers
    from .routes import recipes
    app.include_router(recipes.router, prefix="/recipes", tags=["recipes"])

    return app
