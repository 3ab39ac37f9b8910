"""
FastAPI application factory for the BlogQL server.

This module creates the FastAPI app with:
- CORS configuration for browser clients
- Engine lifecycle management (one engine per app)
- The Strawberry GraphQL router
- A health endpoint

Usage:
    uvicorn blog.blogql_server.api.app:app --port 4000
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from ..config import Settings
from ..engine import Engine
from .schema import make_context, schema

logger = logging.getLogger(__name__)


async def get_context(request: Request) -> dict:
    """Expose the app's engine to resolvers."""
    return make_context(request.app.state.engine)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Server settings (loaded from environment if omitted)
        engine: Engine to serve (built from settings at startup if omitted)

    Returns:
        FastAPI app

    Raises:
        ValueError: If the settings are invalid
    """
    settings = settings or Settings()
    settings.validate_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Manage engine lifecycle."""
        app.state.engine = engine or Engine.create(seed=settings.seed_demo_data)
        app.state.settings = settings
        logger.info("The server is up!")

        yield

        logger.info("BlogQL server stopped")

    app = FastAPI(
        title="BlogQL",
        description="GraphQL API over users, posts and comments.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    graphql_router = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphiql else None,
    )
    app.include_router(graphql_router, prefix=settings.graphql_path)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "service": "blogql"}

    return app


# Default app instance
app = create_app()
