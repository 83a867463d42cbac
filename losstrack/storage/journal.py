import csv
import io
import logging
import os
from pathlib import Path
from typing import List

from losstrack.errors import RecordParseError, StoreIOError
from losstrack.models import Game

logger = logging.getLogger(__name__)


def _encode_line(game: Game) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(game.to_row())
    return buf.getvalue()


def append_record(game: Game, path: Path) -> None:
    path = Path(path)
    line = _encode_line(game)  # serialize before touching the file
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreIOError("create directory", path.parent, e) from e
    try:
        f = path.open("a", newline="", encoding="utf-8")
    except OSError as e:
        raise StoreIOError("open", path, e) from e
    with f:
        try:
            f.write(line)
            f.flush()
            os.fsync(f.fileno())         # on disk before we report success
        except OSError as e:
            raise StoreIOError("write", path, e) from e
    logger.debug("appended %s to %s", line.rstrip("\n"), path)


def read_all_records(path: Path) -> List[Game]:
    path = Path(path)
    records = []
    try:
        f = path.open("r", newline="", encoding="utf-8")
    except OSError as e:
        raise StoreIOError("open", path, e) from e
    with f:
        reader = csv.reader(f)
        try:
            for row in reader:
                if not row:
                    continue
                try:
                    records.append(Game.from_row(row))
                except RecordParseError as e:
                    raise e.at(path, reader.line_num) from e
        except csv.Error as e:
            raise RecordParseError(str(e), path, reader.line_num) from e
        except UnicodeDecodeError as e:
            # decoding runs ahead of the reader, so no line number
            raise RecordParseError(f"not valid UTF-8: {e.reason}", path) from e
        except OSError as e:
            raise StoreIOError("read", path, e) from e
    logger.debug("read %d records from %s", len(records), path)
    return records
