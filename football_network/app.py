"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from strawberry.fastapi import GraphQLRouter

from football_network.api.responses import error_response
from football_network.api.routers import (
    auth,
    clubs,
    connections,
    dashboard,
    files,
    graph,
    navigation,
    users,
)
from football_network.application.registry import ALL_REQUEST_TYPES
from football_network.graphql.context import get_graphql_context
from football_network.graphql.schema import schema
from football_network.infrastructure.auth.auth_middleware import AuthMiddleware
from football_network.infrastructure.config import (
    get_app_version,
    get_auth_settings,
    get_log_level,
)
from football_network.infrastructure.container import Container, build_container, seed_admin
from football_network.infrastructure.persistence.factory import ensure_indexes, reset_repositories

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = get_log_level()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build the application.

    Args:
        container: Pre-built container (tests); built from configuration
            on startup when omitted
    """
    configure_logging()
    settings = get_auth_settings()
    version = get_app_version()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("lifespan.startup", extra={"version": version})
        if container is None:
            app.state.container = build_container()
        else:
            app.state.container = container
        ready: Container = app.state.container
        ready.dispatcher.verify(ALL_REQUEST_TYPES)
        await ensure_indexes(ready.clubs, ready.connections, ready.users, ready.files)
        await seed_admin(ready)
        try:
            yield
        finally:
            if container is None:
                reset_repositories()
            logger.info("lifespan.shutdown")

    app = FastAPI(title="Football Network API", version=version, lifespan=lifespan)
    if container is not None:
        app.state.container = container

    app.add_middleware(AuthMiddleware, auth_required=settings.auth_required)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> Any:
        return error_response(exc.status_code, [str(exc.detail)])

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Any:
        errors = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            errors.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
        return error_response(status.HTTP_400_BAD_REQUEST, errors)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> Any:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, ["An unexpected error occurred."]
        )

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def get_version() -> Dict[str, str]:
        return {"version": version}

    for module in (auth, clubs, connections, graph, dashboard, users, files, navigation):
        app.include_router(module.router)

    graphql_app: GraphQLRouter[Any, Any] = GraphQLRouter(
        schema, context_getter=get_graphql_context
    )
    app.include_router(graphql_app, prefix="/graphql")
    return app
