from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class RoomState:
    """Read-only view of a room, safe to log or hand to the HTTP layer."""

    __slots__ = ("id", "timestamp", "width", "height", "x", "y", "clamp_to_bounds")

    def __init__(self, width, height, x, y, clamp_to_bounds, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.width = width
        self.height = height
        self.x = x
        self.y = y
        self.clamp_to_bounds = clamp_to_bounds

    @property
    def in_bounds(self):
        return 0 <= self.x < self.width and 0 <= self.y < self.height

    @property
    def area(self):
        return self.width * self.height

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "width": self.width,
            "height": self.height,
            "area": self.area,
            "player": {"x": self.x, "y": self.y},
            "clamp_to_bounds": self.clamp_to_bounds,
            "in_bounds": self.in_bounds,
        }
