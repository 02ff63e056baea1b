"""Room errors with tracking IDs."""

from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class BaseRoomError(Exception):
    """Base error with unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "error": self.args[0] if self.args else "",
            "context": self.context,
        }


class OutOfBoundsError(BaseRoomError):
    """A bounded move would put the player outside the room."""

    def __init__(self, target, size, **kwargs):
        context = kwargs.pop("context", {})
        context["target"] = list(target)
        context["size"] = list(size)
        super().__init__("Move out of bounds!", context=context, **kwargs)


class InvalidDimensionsError(BaseRoomError, ValueError):
    """Room width or height is not a positive integer."""

    def __init__(self, width, height, **kwargs):
        context = kwargs.pop("context", {})
        context.update(width=width, height=height)
        super().__init__(f"room dimensions must be positive integers, got {width!r}x{height!r}",
                         context=context, **kwargs)


class ConfigError(BaseRoomError):
    """config.json is unreadable or has unknown keys."""

    def __init__(self, message, path=None, **kwargs):
        context = kwargs.pop("context", {})
        if path:
            context["path"] = str(path)
        super().__init__(message, context=context, **kwargs)
