from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bank_account_service import __version__
from bank_account_service.core.config import Settings, get_settings
from bank_account_service.core.container import ApplicationContainer
from bank_account_service.core.logging import setup_logging
from bank_account_service.interfaces.graphql import create_graphql_router
from bank_account_service.interfaces.http.routers import create_api_router, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    yield
    await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.logging)

    app = FastAPI(
        title=settings.project_name,
        description="Bank account bookkeeping over REST, GraphQL and repository endpoints",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(create_graphql_router(settings.graphql), prefix=settings.graphql.path, tags=["graphql"])

    return app


app = create_app()
