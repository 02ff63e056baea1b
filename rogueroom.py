"""Rogue Room - console entry point."""

import sys

from config import load_config
from utils.crash import configure as configure_crash, install_crash_handler

config = load_config()
configure_crash(config.logging.crash_file)
install_crash_handler()

from game.loop import run
from game.room import Room
from internal.logging import LogLevel, StructuredLogger


def main():
    StructuredLogger.configure(LogLevel.parse(config.logging.level), config.logging.file)
    room = Room.from_config(config.room)
    return run(room, config.room)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print()
        sys.exit(0)
