from pathlib import Path
from typing import Optional


class LossesError(Exception):
    """Base class for every error raised by losstrack."""


class StoreIOError(LossesError):
    """A filesystem operation on the store failed."""

    def __init__(self, operation: str, path: Path, cause: OSError):
        self.operation = operation
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot {operation} {self.path}: {reason}")


class RecordParseError(LossesError, ValueError):
    """A store line does not decode into a Game."""

    def __init__(self, reason: str, path: Optional[Path] = None, line: Optional[int] = None):
        self.reason = reason
        self.path = path
        self.line = line
        where = ""
        if path is not None:
            where = f"{path}:{line}: " if line is not None else f"{path}: "
        super().__init__(f"{where}malformed record: {reason}")

    def at(self, path: Path, line: int) -> "RecordParseError":
        return RecordParseError(self.reason, path, line)


class RecordSerializationError(LossesError):
    """A Game could not be turned into a store line."""
