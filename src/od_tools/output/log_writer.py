"""Delivery of a generated log to stdout or a file."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from od_tools.utils.exceptions import LogWriteError
from od_tools.utils.logging import get_logger

logger = get_logger(__name__)

STDOUT_TARGET = "std"


@dataclass
class LogWriteResult:
    """Where a log ended up."""

    path: Path | None
    """File written, or None when the log went to stdout."""

    characters: int = 0
    """Number of characters written."""

    @property
    def to_stdout(self) -> bool:
        return self.path is None


class LogWriter:
    """Write a log to a file, or to stdout when no file is given.

    ``"std"`` is accepted as an explicit stdout target.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, log: str, result_path: Path | None = None) -> LogWriteResult:
        """Write ``log`` and report where it went.

        Raises:
            LogWriteError: If the file cannot be written.
        """
        if result_path is None or str(result_path) == STDOUT_TARGET:
            stream = self._stream or sys.stdout
            stream.write(log)
            stream.flush()
            return LogWriteResult(path=None, characters=len(log))

        try:
            result_path.write_text(log, encoding="utf-8")
        except OSError as e:
            raise LogWriteError(str(result_path), str(e)) from e

        logger.info("Wrote log", path=result_path, characters=len(log))
        return LogWriteResult(path=result_path, characters=len(log))
