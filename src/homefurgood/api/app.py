"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import requests
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from homefurgood.config import Config, get_config
from homefurgood.errors import HomeFurGoodError
from homefurgood.search.favorites import (
    FavoriteCountSource,
    HttpFavoriteCounts,
    StaticFavoriteCounts,
)
from homefurgood.search.registry_client import RegistryClient, build_session
from homefurgood.search.searcher import DogSearcher
from homefurgood.search.spotlight import SpotlightSelector

logger = logging.getLogger(__name__)


def build_searcher(
    config: Config,
    session: requests.Session,
    favorites_session: requests.Session,
) -> DogSearcher:
    """Wire the registry client, favorite counts and spotlight together.

    Args:
        config: Application configuration.
        session: Authenticated registry session.
        favorites_session: Session for the favorites service.

    Returns:
        DogSearcher ready to serve requests.
    """
    registry = RegistryClient(
        session,
        base_url=config.rescuegroups_api_base,
        timeout=config.request_timeout,
    )
    favorites: FavoriteCountSource
    if config.favorites_url:
        favorites = HttpFavoriteCounts(
            favorites_session, config.favorites_url, timeout=config.request_timeout
        )
    else:
        logger.warning("FAVORITES_URL not set; spotlight uses empty favorite counts")
        favorites = StaticFavoriteCounts()

    spotlight = SpotlightSelector(
        registry, favorites, radius_miles=config.spotlight_radius_miles
    )
    return DogSearcher(
        registry,
        spotlight,
        page_size=config.search_page_size,
        breed_page_size=config.breed_search_page_size,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize shared resources on startup, clean up on shutdown.

    Fails startup with ConfigurationError when the registry API key is
    missing.
    """
    config = get_config()
    session = build_session(config.require_api_key())
    favorites_session = requests.Session()

    app.state.config = config
    app.state.session = session
    app.state.favorites_session = favorites_session
    app.state.searcher = build_searcher(config, session, favorites_session)

    yield

    session.close()
    favorites_session.close()


async def handle_app_error(request: Request, exc: HomeFurGoodError) -> JSONResponse:
    """Render package errors as ``{"error": {"message", "status"}}``."""
    if exc.status >= 500:
        logger.error("ERROR: %d %s", exc.status, exc.message)
    return JSONResponse(
        status_code=exc.status,
        content={"error": {"message": exc.message, "status": exc.status}},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Home Fur Good",
        description="Adoptable dog discovery with breed matching and a favorites spotlight",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(HomeFurGoodError, handle_app_error)

    from homefurgood.api.routes import router

    app.include_router(router)

    return app
