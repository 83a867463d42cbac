import logging
from pathlib import Path
from typing import List, Union

from losstrack.models import Cause, Game
from losstrack.storage.journal import append_record, read_all_records

logger = logging.getLogger(__name__)


def add(cause: Union[Cause, str], path: Path) -> Game:
    """Record a loss caused by `cause`, stamped with the current UTC time."""
    if not isinstance(cause, Cause):
        cause = Cause.parse(cause)
    rec = Game.now(cause)
    append_record(rec, path)
    logger.debug("recorded %s loss at %s", rec.cause.value, rec.occurred_at.isoformat())
    return rec


def list_games(path: Path) -> List[Game]:
    return read_all_records(path)
