from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from taskmanager.config import get_settings
from taskmanager.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared outbound HTTP client and close it on shutdown."""

    settings = get_settings()
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    yield
    await app.state.http_client.aclose()


def create_app() -> FastAPI:
    """Create and configure the webhook application."""

    app = FastAPI(lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
