"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import ai, categories, health, prompts, tags, users
from core.config import get_settings
from core.logging import configure_logging
from db.seed import create_seeded_store
from db.store import EntityStore
from services.llm import build_llm_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings = get_settings()
    configure_logging(app_settings.log_level)

    # Startup: the store lives for the life of the process
    app.state.store = create_seeded_store() if app_settings.seed_data else EntityStore()
    app.state.llm_provider = build_llm_provider(app_settings)

    yield

    # Shutdown: release the provider's HTTP client
    await app.state.llm_provider.aclose()


async def validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report request validation failures as 400 with the individual errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app_settings = get_settings()

    app = FastAPI(
        title="Prompt Library API",
        description="Browse, create, tag and categorize reusable AI prompts.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(prompts.router)
    app.include_router(tags.router)
    app.include_router(users.router)
    app.include_router(ai.router)
    return app


app = create_app()
