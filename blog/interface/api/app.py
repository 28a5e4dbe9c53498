"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.domain.repository import ArticleRepository
from blog.interface.api.routes import (
    comments,
    contact,
    health,
    newsletter,
    posts,
    site,
    taxonomy,
)
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi

API_PREFIX = "/api"


def _lifespan(container: AsyncContainer):
    """Load the article catalog before serving and close the container after."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # A broken catalog (duplicate slugs, unreadable file) fails start-up
        async with container() as request_container:
            await request_container.get(ArticleRepository)
        logfire.info("Article catalog ready")
        yield
        await container.close()

    return lifespan


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()
    container = container or create_container()

    app_instance = FastAPI(
        title="BlogDev API",
        description="Backend API for BlogDev - articles, comments, contact and newsletter",
        version="0.1.0",
        lifespan=_lifespan(container),
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router, prefix=API_PREFIX)
    app_instance.include_router(taxonomy.router, prefix=API_PREFIX)
    app_instance.include_router(site.router, prefix=API_PREFIX)
    app_instance.include_router(comments.router, prefix=API_PREFIX)
    app_instance.include_router(newsletter.router, prefix=API_PREFIX)
    app_instance.include_router(contact.router, prefix=API_PREFIX)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
