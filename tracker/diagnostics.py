"""Diagnostics sink for non-fatal extraction failures."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)

DEFAULT_ERROR_LOG = "dependency-tracker-error.log"


class Diagnostics(Protocol):
    """Anything that can take note of a failure with a short context label."""

    def record(self, context: str, cause: BaseException) -> None:
        ...


def format_failure(context: str, cause: BaseException, when: datetime) -> str:
    """
    Format one error log line.

    Example:
        ``[2024-05-01T12:00:00.000Z] Error extracting dependencies (/src/a.js): boom``
    """
    timestamp = when.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    timestamp = timestamp.replace("+00:00", "Z")
    message = str(cause) or type(cause).__name__
    return f"[{timestamp}] {context}: {message}\n"


class ErrorLog:
    """
    Append-only error log file.

    The file is opened per failure and never read, truncated or rotated.
    A relative path is resolved against the working directory at write time.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_ERROR_LOG):
        self.path = Path(path)

    def record(self, context: str, cause: BaseException) -> None:
        line = format_failure(context, cause, datetime.now(timezone.utc))
        with self.path.resolve().open("a", encoding="utf-8") as fh:
            fh.write(line)
        logger.debug("Appended failure to %s", self.path)

    def __repr__(self) -> str:
        return f"ErrorLog(path={str(self.path)!r})"
