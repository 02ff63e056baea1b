import sys

from core.errors import InvalidDimensionsError, OutOfBoundsError
from game.state import RoomState
from internal.logging import get_logger

WALL_CORNER = "+"
WALL_HORIZONTAL = "-"
WALL_VERTICAL = "|"
FLOOR = "."
PLAYER = "@"


def _is_dimension(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class Room:
    """A fixed-size rectangular room with one player marker.

    With clamp_to_bounds set, moves that would leave the grid are rejected
    whole and the position never leaves [0, width) x [0, height). Without it,
    moves always apply and an off-grid player is simply not drawn.
    """

    def __init__(self, width, height, clamp_to_bounds=True):
        if not (_is_dimension(width) and _is_dimension(height)):
            raise InvalidDimensionsError(width, height)
        self.width = width
        self.height = height
        self.clamp_to_bounds = clamp_to_bounds
        self.x = 0
        self.y = 0
        self._log = get_logger()
        self._log.debug("room created", width=width, height=height, clamp_to_bounds=clamp_to_bounds)

    @classmethod
    def from_config(cls, config):
        return cls(config.width, config.height, clamp_to_bounds=config.clamp_to_bounds)

    @property
    def position(self):
        return self.x, self.y

    def area(self):
        return self.width * self.height

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def is_player_in_bounds(self):
        return self.in_bounds(self.x, self.y)

    def display(self, out=None):
        """Write a one-line summary of the player position and room size."""
        out = out or sys.stdout
        # Dimensions read height-by-width, as the console has always shown them
        print(f"Player at ({self.x}, {self.y}) in room with dimensions "
              f"{self.height}x{self.width} has area: {self.area()}", file=out)

    def check_move(self, dx, dy):
        """Raise OutOfBoundsError if (x+dx, y+dy) is off the grid."""
        target = (self.x + dx, self.y + dy)
        if not self.in_bounds(*target):
            raise OutOfBoundsError(target, (self.width, self.height))
        return target

    def try_move(self, dx, dy):
        """Move by (dx, dy), raising OutOfBoundsError instead of printing on rejection."""
        if self.clamp_to_bounds:
            self.x, self.y = self.check_move(dx, dy)
        else:
            self.x += dx
            self.y += dy
        self._log.debug("player moved", dx=dx, dy=dy, x=self.x, y=self.y)
        return self.position

    def move(self, dx, dy, out=None):
        """Apply a move; returns False when the bounded policy rejected it."""
        try:
            self.try_move(dx, dy)
        except OutOfBoundsError as exc:
            print(exc.args[0], file=out or sys.stdout)
            self._log.warn("move rejected", error_id=exc.error_id, x=self.x, y=self.y, dx=dx, dy=dy)
            return False
        return True

    def reset(self):
        self.x = 0
        self.y = 0

    def render(self):
        border = WALL_CORNER + WALL_HORIZONTAL * self.width + WALL_CORNER
        lines = [border]
        for row in range(self.height):
            cells = [FLOOR] * self.width
            if row == self.y and 0 <= self.x < self.width:
                cells[self.x] = PLAYER
            lines.append(WALL_VERTICAL + "".join(cells) + WALL_VERTICAL)
        lines.append(border)
        return "\n".join(lines)

    def draw_room(self, out=None):
        print(self.render(), file=out or sys.stdout)

    def to_state(self):
        return RoomState(self.width, self.height, self.x, self.y, self.clamp_to_bounds)
