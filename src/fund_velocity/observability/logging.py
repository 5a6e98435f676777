from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from fund_velocity.config.models import LoggingConfig

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload; fields carry machine-readable context.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")
        if self.level not in _LEVELS:
            raise ValueError(f"Unknown log level: {self.level}")


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        ...

    def close(self) -> None:
        ...


class StdoutLogSink:
    # Compact JSON per line on stdout (or any text stream given in tests).
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(_dumps(message) + "\n")
        stream.flush()

    def close(self) -> None:
        pass


class JsonlLogSink:
    # File-backed structured log sink; appends so repeated runs share one file.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_dumps(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


@dataclass
class Logger:
    # Level-filtering facade over a single sink.
    sink: LogSink
    level: str = "INFO"

    def log(self, level: str, message: str, **fields: object) -> None:
        if _LEVELS[level] < _LEVELS[self.level]:
            return
        self.sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))

    def debug(self, message: str, **fields: object) -> None:
        self.log("DEBUG", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.log("INFO", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.log("WARNING", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.log("ERROR", message, **fields)

    def close(self) -> None:
        self.sink.close()


def build_logger(config: LoggingConfig) -> Logger:
    if config.sink.kind == "jsonl":
        assert config.sink.path is not None
        sink: LogSink = JsonlLogSink(Path(config.sink.path))
    else:
        sink = StdoutLogSink()
    return Logger(sink=sink, level=config.level)


def _dumps(message: LogMessage) -> str:
    payload = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
