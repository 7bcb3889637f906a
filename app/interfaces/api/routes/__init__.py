from fastapi import FastAPI

from .notification_channels import router as notification_channels_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(notification_channels_router)
