from fastapi import FastAPI

from .asset_types import router as asset_types_router
from .assets import router as assets_router
from .notification_rules import router as notification_rules_router
from .notifications import router as notifications_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(users_router)
    app.include_router(asset_types_router)
    app.include_router(assets_router)
    app.include_router(notification_rules_router)
    app.include_router(notifications_router)
