"""FastAPI application factory for the HTTP room view."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import HealthChecker, check_event_loop, create_room_check
from game.room import Room
from internal.logging import LogLevel, StructuredLogger
from ui import auth
from ui.routes import health, room as room_routes


def create_app(config=None):
    """Create and configure the FastAPI application around a fresh Room."""
    config = config or load_config()

    logger_instance = StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level),
                                                 path=config.logging.file)

    room = Room.from_config(config.room)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("room", create_room_check(room), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", width=room.width, height=room.height,
                             clamp_to_bounds=room.clamp_to_bounds)
        yield
        logger_instance.info("Application shutdown complete", x=room.x, y=room.y)

    app = FastAPI(
        title="Rogue Room",
        version="1.0.0",
        description="ASCII room with a single movable player",
        lifespan=lifespan,
    )
    app.state.room = room

    auth.init(config.server.username, config.server.password)
    room_routes.init(room)
    health.init(health_checker)

    app.include_router(room_routes.router)
    app.include_router(health.router)

    return app
