import json
from pathlib import Path

from core.errors import ConfigError

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

MODES = ("interactive", "scripted")


class RoomConfig:
    __slots__ = ("width", "height", "clamp_to_bounds", "mode", "scripted_moves")

    def __init__(self, width=10, height=5, clamp_to_bounds=True, mode="interactive", scripted_moves=None):
        if mode not in MODES:
            raise ConfigError(f"unknown mode {mode!r}, expected one of {', '.join(MODES)}")
        for name, value in (("width", width), ("height", height)):
            if not _is_int(value) or value <= 0:
                raise ConfigError(f"room.{name} must be a positive integer, got {value!r}")
        if not isinstance(clamp_to_bounds, bool):
            raise ConfigError(f"room.clamp_to_bounds must be true or false, got {clamp_to_bounds!r}")
        self.width = width
        self.height = height
        self.clamp_to_bounds = clamp_to_bounds
        self.mode = mode
        self.scripted_moves = [(3, 2), (1, 1)] if scripted_moves is None else _parse_moves(scripted_moves)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_moves(moves):
    parsed = []
    for move in moves:
        if not isinstance(move, (list, tuple)) or len(move) != 2 or not all(_is_int(v) for v in move):
            raise ConfigError(f"room.scripted_moves entries must be [dx, dy] integer pairs, got {move!r}")
        parsed.append(tuple(move))
    return parsed


class ServerConfig:
    __slots__ = ("host", "port", "username", "password")

    def __init__(self, host="127.0.0.1", port=8080, username="admin", password="admin123"):
        self.host = host
        self.port = port
        self.username = username
        self.password = password


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/rogueroom.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


def _section(cls, data, name):
    try:
        return cls(**data.get(name, {}))
    except TypeError as exc:
        raise ConfigError(f"bad [{name}] section: {exc}", cause=exc) from exc


class Config:
    __slots__ = ("room", "server", "logging")

    def __init__(self, room=None, server=None, logging=None):
        self.room = room or RoomConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        unknown = set(d) - set(cls.__slots__)
        if unknown:
            raise ConfigError(f"unknown config sections: {', '.join(sorted(unknown))}")
        return cls(
            _section(RoomConfig, d, "room"),
            _section(ServerConfig, d, "server"),
            _section(LoggingConfig, d, "logging"),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path, encoding="utf-8") as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON: {exc}", path=config_path, cause=exc) from exc
    try:
        return Config.from_dict(data)
    except ConfigError as exc:
        exc.context.setdefault("path", str(config_path))
        raise
