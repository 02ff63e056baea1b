import sys

from game.controls import PROMPT, QUIT_KEY, delta_for, read_keys
from internal.logging import get_logger


def run_interactive(room, keys=None, out=None):
    """Draw, prompt, read a key, move; until q or end of input."""
    out = out or sys.stdout
    keys = iter(keys) if keys is not None else read_keys(sys.stdin)
    log = get_logger()
    log.info("game start", mode="interactive", width=room.width, height=room.height)

    moves = 0
    while True:
        room.draw_room(out)
        print(PROMPT, end="", file=out, flush=True)
        key = next(keys, None)
        if key is None:
            # End of input behaves like q
            print(file=out)
            break
        if key == QUIT_KEY:
            break
        delta = delta_for(key)
        if delta is None:
            continue
        if room.move(*delta, out=out):
            moves += 1

    log.info("game stop", moves=moves, x=room.x, y=room.y)
    return 0


def run_scripted(room, moves, out=None):
    """Non-interactive demo: show the room, apply the given moves, show it again."""
    out = out or sys.stdout
    log = get_logger()
    log.info("game start", mode="scripted", moves=len(moves))

    room.draw_room(out)
    room.display(out)
    for dx, dy in moves:
        room.move(dx, dy, out=out)
    room.draw_room(out)
    room.display(out)

    log.info("game stop", x=room.x, y=room.y)
    return 0


def run(room, config, out=None, keys=None):
    if config.mode == "scripted":
        return run_scripted(room, config.scripted_moves, out=out)
    return run_interactive(room, keys=keys, out=out)
