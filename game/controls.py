"""Keyboard mapping for the console game."""

QUIT_KEY = "q"

KEY_DELTAS = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}

PROMPT = "Move (w/a/s/d) or q to quit: "


def delta_for(key):
    """Return the (dx, dy) for a movement key, or None for anything else."""
    return KEY_DELTAS.get(key)


def read_keys(stream):
    """Yield non-whitespace characters from stream one at a time.

    Several keys typed on one line are consumed in order, so "ddw" moves
    twice right then up. Iteration stops at end of input.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        for char in line:
            if not char.isspace():
                yield char
