from datetime import datetime
from enum import Enum
from typing import List, Sequence

from dateutil import parser as dateparser
from dateutil import tz
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from losstrack.errors import RecordParseError, RecordSerializationError

# --- Cause ---

class Cause(str, Enum):
    """Why a game was lost. Declaration order is the summary tie-break."""

    OPENING = "Opening"
    MIDDLEGAME = "Middlegame"
    ENDGAME = "Endgame"
    TIME = "Time"
    STRATEGY = "Strategy"  # gradually lost for lack of a plan

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Cause":
        try:
            return cls(name)
        except ValueError:
            allowed = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown cause {name!r} (expected one of: {allowed})") from None

# --- Record ---

class Game(BaseModel):
    """One lost game: when it was recorded and why it was lost."""

    model_config = ConfigDict(frozen=True)

    occurred_at: datetime
    cause: Cause

    @field_validator("occurred_at", mode="before")
    @classmethod
    def _parse_timestamp(cls, v):
        if isinstance(v, str):
            try:
                v = dateparser.isoparse(v)
            except OverflowError as e:
                raise ValueError(f"timestamp out of range: {e}") from e
        return v

    @field_validator("occurred_at")
    @classmethod
    def _normalize_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("timestamp has no UTC offset")
        try:
            return v.astimezone(tz.UTC)
        except OverflowError as e:
            raise ValueError(f"timestamp out of range: {e}") from e

    @classmethod
    def now(cls, cause: Cause) -> "Game":
        return cls(occurred_at=datetime.now(tz.UTC), cause=cause)

    def to_row(self) -> List[str]:
        try:
            return [self.occurred_at.isoformat(timespec="microseconds"), Cause(self.cause).value]
        except (TypeError, ValueError) as e:
            raise RecordSerializationError(f"Cannot serialize {self!r}: {e}") from e

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Game":
        if len(row) != 2:
            raise RecordParseError(f"expected 2 fields, found {len(row)}")
        ts, cause = row
        try:
            return cls(occurred_at=ts, cause=cause)
        except ValidationError as e:
            reasons = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
            raise RecordParseError(reasons) from e
