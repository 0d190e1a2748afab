"""
Passgen Structured Logger
==========================

All passgen loggers live under the ``passgen`` namespace
(``passgen.engine``, ``passgen.corpora``, ...). :func:`configure_logging`
wires that namespace once per process: a Rich handler on stderr, so that
stdout stays clean for passwords and JSON, plus an optional rotating file
that takes either plain text or one JSON object per line.

:class:`PassgenLogger` is the facade components use. It tags each record
with its component and the current operation, and keyword arguments to
the log methods become structured ``extra`` fields::

    log = PassgenLogger("engine")
    with log.operation("check_password"):
        log.info("Checking password", length=12)

Secrets must never be passed to a logger; log lengths and masked forms.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_ROOT_LOGGER_NAME = "passgen"

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Keyword arguments the stdlib logging calls accept directly.
_STDLIB_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)


class _JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, and when set,
    ``component``, ``operation``, ``extra`` and ``exc_info``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, attr in (
            ("component", "component"),
            ("operation", "operation"),
            ("extra", "passgen_extra"),
        ):
            value = getattr(record, attr, None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )


def _file_handler(path: Path, level: int, json_lines: bool, max_bytes: int,
                  backup_count: int) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONFormatter() if json_lines
        else logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
    )
    return handler


def configure_logging(
    log_level: str = "WARNING",
    *,
    log_file: str | Path | None = None,
    json_logs: bool = False,
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
    console_output: bool = True,
) -> logging.Logger:
    """(Re)wire the ``passgen`` logger namespace and return its root.

    Calling this again replaces the previous handlers. An unknown level
    name falls back to WARNING.

    Args:
        log_level: Level name, e.g. ``"DEBUG"``.
        log_file: Rotating log file; ``None`` for console only.
        json_logs: Write the file as JSON lines instead of plain text.
        max_bytes: Rotate the file at this size (default 10 MiB).
        backup_count: Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.setLevel(level)
    root.propagate = False

    if console_output:
        root.addHandler(_console_handler(level))
    if log_file is not None:
        root.addHandler(
            _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
        )
    return root


class _Stopwatch:
    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed(self) -> float:
        """Seconds since the stopwatch was created."""
        return time.perf_counter() - self._start


class PassgenLogger:
    """Component-bound logger with operation scoping and structured extras."""

    def __init__(self, component: str) -> None:
        self._component = component
        self._operation: str | None = None
        self._logger = logging.getLogger(f"{_ROOT_LOGGER_NAME}.{component}")

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        return self._logger

    @contextmanager
    def operation(self, name: str) -> Iterator[PassgenLogger]:
        """Tag records logged inside the block with *name*; nests."""
        outer, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = outer

    @contextmanager
    def timed(self, label: str) -> Iterator[_Stopwatch]:
        """Log *label* at DEBUG on entry and again with the elapsed time."""
        self.debug("Started: %s", label)
        watch = _Stopwatch()
        try:
            yield watch
        finally:
            self.debug("Completed: %s (%.3f sec)", label, watch.elapsed)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.ERROR, msg, args, kwargs)

    def _emit(self, level: int, msg: str, args: tuple[Any, ...],
              kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        extra = dict(kwargs.pop("extra", None) or {})
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _STDLIB_KWARGS}
        extra["component"] = self._component
        extra["operation"] = self._operation
        if kwargs:
            extra["passgen_extra"] = kwargs
        passthrough.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, extra=extra, **passthrough)
