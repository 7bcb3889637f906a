from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.container import ChannelDirectory, build_channel_directory_from_environment
from app.interfaces.api.routes import register_routes


def create_app(directory: ChannelDirectory | None = None) -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Ensambla el directorio de canales al arrancar y libera el engine al cerrar."""

        if getattr(app.state, "channel_directory", None) is None:
            app.state.channel_directory = build_channel_directory_from_environment()
        yield
        app.state.channel_directory.close()

    app = FastAPI(lifespan=lifespan)
    app.state.channel_directory = directory
    register_routes(app)
    return app


app = create_app()
