from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wishlist.core.config import settings
from wishlist.exceptions.handlers import register_exception_handlers
from wishlist.routers import router
from wishlist.services.container import ServiceContainer


def create_app(container: ServiceContainer = None) -> FastAPI:
    """Build the FastAPI application around a service container."""
    container = container or ServiceContainer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Shutdown: release pooled connections of the fetch client
        container.close()

    app = FastAPI(
        title="Wishlist Server",
        description="Share wishlists whose items describe themselves",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Include the centralized router
    app.include_router(router, prefix="/api")
    return app
