"""Room view and move routes."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from core.errors import OutOfBoundsError
from internal.logging import get_logger
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1/room", tags=["room"])

# Set by app.py
_room = None


def init(room):
    global _room
    _room = room


class MoveRequest(BaseModel):
    dx: int = 0
    dy: int = 0


@router.get("")
async def state():
    """Current room snapshot."""
    return _room.to_state().to_dict()


@router.get("/draw", response_class=PlainTextResponse)
async def draw():
    """ASCII rendering of the room."""
    return _room.render() + "\n"


@router.post("/move")
async def move(body: MoveRequest, username=Depends(verify_basic_auth)):
    """Move the player (requires basic auth). 409 when the bounded policy rejects it."""
    try:
        _room.try_move(body.dx, body.dy)
    except OutOfBoundsError as exc:
        get_logger().warn("move rejected", error_id=exc.error_id, user=username, dx=body.dx, dy=body.dy)
        return JSONResponse(content=exc.to_dict(), status_code=409)
    return _room.to_state().to_dict()


@router.post("/reset")
async def reset(username=Depends(verify_basic_auth)):
    """Put the player back at the origin (requires basic auth)."""
    _room.reset()
    get_logger().info("room reset", user=username)
    return _room.to_state().to_dict()
