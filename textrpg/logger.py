"""Append-only game log written to a text file."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import IO, Optional

DEFAULT_LOG_PATH = "GameLog.txt"


class Logger:
    """Writes timestamped messages to a log file opened in append mode."""

    def __init__(self, path: str | Path = DEFAULT_LOG_PATH) -> None:
        self.path = Path(path)
        self._file: Optional[IO[str]]
        try:
            self._file = open(self.path, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print(f"[Logger] Failed to open {self.path}", file=sys.stderr)

    @property
    def is_open(self) -> bool:
        return self._file is not None and not self._file.closed

    def log(self, message: str) -> None:
        """Record ``message`` with the current local time; no-op if closed."""
        if not self.is_open:
            return
        assert self._file is not None
        self._file.write(f"[{time.ctime()}] {message}\n")
        self._file.flush()

    def close(self) -> None:
        if self.is_open:
            assert self._file is not None
            self._file.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_instance: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Logger()
    return _instance