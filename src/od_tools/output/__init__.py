"""Output delivery for generated logs."""

from od_tools.output.log_writer import LogWriter, LogWriteResult

__all__ = [
    "LogWriteResult",
    "LogWriter",
]
