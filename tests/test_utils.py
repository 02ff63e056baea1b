"""Unit tests for utilities, logging and errors."""

import json
import sys

import pytest
from core.errors import BaseRoomError, OutOfBoundsError, ConfigError
from internal.logging import LogLevel, StructuredLogger, get_logger
from utils.ksuid import KSUID_EPOCH, generate_ksuid
from utils.timestamp import format_timestamp, now_micros
from utils import crash


class TestKSUID:
    """Tests for KSUID generation."""

    def test_generate_ksuid_length(self):
        """KSUID is a 27 character string."""
        ksuid = generate_ksuid()
        assert isinstance(ksuid, str)
        assert len(ksuid) == 27

    def test_generate_ksuid_unique(self):
        """KSUIDs are unique."""
        ksuids = [generate_ksuid() for _ in range(100)]
        assert len(set(ksuids)) == 100

    def test_generate_ksuid_sortable(self):
        """Later seconds sort after earlier ones."""
        earlier = generate_ksuid(now=KSUID_EPOCH + 1000)
        later = generate_ksuid(now=KSUID_EPOCH + 2000)
        assert later > earlier


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_fixed(self):
        """Known epoch formats as ISO 8601 UTC."""
        assert format_timestamp(1_500_000_000_123_456) == "2017-07-14T02:40:00.123456Z"

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes six fractional digits."""
        ts = format_timestamp()
        assert ts.endswith("Z")
        assert len(ts.split(".")[1]) == 7

    def test_now_micros(self):
        """now_micros is an int after 2020."""
        micros = now_micros()
        assert isinstance(micros, int)
        assert micros > 1577836800000000


class TestStructuredLogger:
    """Tests for the JSON logger."""

    def test_writes_json_lines_to_file(self, tmp_path):
        """Records are JSON objects with level and fields."""
        path = tmp_path / "logs" / "game.log"
        logger = StructuredLogger(LogLevel.DEBUG, str(path))
        logger.info("player moved", x=1, y=2)
        logger.warn("move rejected", error=ValueError("nope"))
        lines = path.read_text().splitlines()
        assert len(lines) == 2
        first, second = (json.loads(line) for line in lines)
        assert first["msg"] == "player moved"
        assert first["level"] == "INFO"
        assert first["x"] == 1
        assert second["level"] == "WARN"
        assert second["err"] == "nope"

    def test_level_filter(self, tmp_path):
        """Records below the level are dropped."""
        path = tmp_path / "game.log"
        logger = StructuredLogger(LogLevel.WARN, str(path))
        logger.debug("quiet")
        logger.info("quiet")
        logger.error("loud")
        assert logger.written == 1

    def test_stderr_when_no_path(self, capsys):
        """Without a path records go to stderr."""
        StructuredLogger().info("hello")
        assert json.loads(capsys.readouterr().err)["msg"] == "hello"

    def test_configure_replaces_global(self, tmp_path):
        """configure swaps the process-wide logger."""
        logger = StructuredLogger.configure(LogLevel.ERROR, str(tmp_path / "x.log"))
        assert get_logger() is logger
        StructuredLogger.configure()

    @pytest.mark.parametrize("name,level", [("debug", LogLevel.DEBUG), ("WARNING", LogLevel.WARN),
                                            ("warn", LogLevel.WARN), ("ERROR", LogLevel.ERROR)])
    def test_parse_level(self, name, level):
        assert LogLevel.parse(name) == level

    @pytest.mark.parametrize("name", ["bogus", "TRACE", "", "WARNINGS"])
    def test_parse_unknown_level(self, name):
        """Unknown level names are a config error, not a silent INFO."""
        with pytest.raises(ConfigError) as info:
            LogLevel.parse(name)
        assert "unknown log level" in str(info.value)


class TestErrors:
    """Tests for tracked errors."""

    def test_error_has_id(self):
        """Errors carry an id, timestamp and id-prefixed str."""
        err = BaseRoomError("boom", context={"k": 1})
        assert len(err.error_id) == 27
        assert "T" in err.timestamp
        assert str(err) == f"[{err.error_id}] boom"
        assert err.to_dict()["context"] == {"k": 1}

    def test_out_of_bounds_message(self):
        """OutOfBoundsError carries the console message."""
        err = OutOfBoundsError((10, 0), (10, 5))
        assert err.args[0] == "Move out of bounds!"
        assert err.to_dict()["error"] == "Move out of bounds!"

    def test_config_error_cause(self):
        cause = KeyError("x")
        err = ConfigError("bad", path="/tmp/c.json", cause=cause)
        assert err.cause is cause
        assert err.context["path"] == "/tmp/c.json"


class TestCrashHandler:
    """Tests for crash handling utilities."""

    def test_log_crash_writes_record(self, tmp_path, capsys, monkeypatch):
        """log_crash writes a banner to stderr and a JSON record to the crash file."""
        path = tmp_path / "crash" / "crash.log"
        monkeypatch.setattr(crash, "_crash_log", str(path))
        try:
            raise RuntimeError("room exploded")
        except RuntimeError:
            crash_id = crash.log_crash(*sys.exc_info())
        assert f"CRASH [{crash_id}]" in capsys.readouterr().err
        record = json.loads(path.read_text())
        assert record["id"] == crash_id
        assert record["type"] == "RuntimeError"
        assert record["msg"] == "room exploded"

    def test_configure_sets_path(self, monkeypatch):
        """configure() sets crash log path."""
        monkeypatch.setattr(crash, "_crash_log", crash._crash_log)
        crash.configure("/tmp/test_crash.log")
        assert crash._crash_log == "/tmp/test_crash.log"

    def test_install_crash_handler(self, monkeypatch):
        """install_crash_handler sets sys.excepthook."""
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        crash.install_crash_handler()
        assert sys.excepthook == crash.log_crash
