# losstrack/summary.py
import logging
import sys
from collections import defaultdict
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Iterable, List, Optional, TextIO

from dateutil import tz

from losstrack.domains.losses import list_games
from losstrack.models import Cause, Game

logger = logging.getLogger(__name__)

WINDOW = timedelta(days=30)

_DECLARED = {cause: i for i, cause in enumerate(Cause)}


def aggregate(games: Iterable[Game], now: datetime) -> Dict[Cause, int]:
    """Count causes of the games strictly newer than ``now - WINDOW``.

    The result is ordered by descending count; equal counts keep the
    declaration order of ``Cause``. Causes with no games are left out.
    """
    cutoff = now - WINDOW
    counts = defaultdict(int)
    for g in games:
        if g.occurred_at > cutoff:
            counts[g.cause] += 1
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], _DECLARED[kv[0]]))
    return dict(ranked)


def format_summary(counts: Dict[Cause, int]) -> List[str]:
    return [f"{cause.value}: {count}" for cause, count in counts.items()]


def summarize(path: Path, now: Optional[datetime] = None, out: Optional[TextIO] = None) -> Dict[Cause, int]:
    # read everything first: a bad line must abort before any output
    games = list_games(path)
    if now is None:
        now = datetime.now(tz.UTC)
    counts = aggregate(games, now)
    logger.debug(
        "%d of %d games since %s", sum(counts.values()), len(games), (now - WINDOW).isoformat()
    )
    out = out or sys.stdout
    for line in format_summary(counts):
        print(line, file=out)
    return counts
