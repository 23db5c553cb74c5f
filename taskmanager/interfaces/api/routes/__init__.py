from fastapi import FastAPI

from .push_webhook import router as push_webhook_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(push_webhook_router)
