"""Tests for the append-only CSV store."""

import re
from datetime import datetime, timezone
from pathlib import Path

import pytest

from losstrack.errors import RecordParseError, StoreIOError
from losstrack.models import Cause, Game
from losstrack.storage.journal import append_record, read_all_records

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path: Path) -> Path:
    return tmp_path / "games.csv"


def test_append_creates_missing_directories(tmp_path: Path):
    path = tmp_path / "a" / "b" / "c" / "games.csv"

    append_record(Game(occurred_at=T0, cause=Cause.OPENING), path)

    assert path.parent.is_dir()
    assert read_all_records(path) == [Game(occurred_at=T0, cause=Cause.OPENING)]


def test_append_writes_one_line(store: Path):
    append_record(Game(occurred_at=T0, cause=Cause.ENDGAME), store)

    assert store.read_text() == "2024-03-01T12:00:00.000000+00:00,Endgame\n"


def test_appends_keep_call_order(store: Path):
    causes = [Cause.TIME, Cause.OPENING, Cause.TIME, Cause.STRATEGY, Cause.MIDDLEGAME]
    for c in causes:
        append_record(Game.now(c), store)

    lines = store.read_text().splitlines()
    games = read_all_records(store)

    assert len(lines) == len(causes)
    assert all(re.match(r"^\d{4}-\d\d-\d\dT[\d:.]+\+00:00,\w+$", line) for line in lines)
    assert [g.cause for g in games] == causes


def test_append_preserves_existing_content(store: Path):
    store.write_text("2024-01-01T00:00:00+00:00,Time\n")

    append_record(Game(occurred_at=T0, cause=Cause.OPENING), store)

    assert store.read_text().startswith("2024-01-01T00:00:00+00:00,Time\n")
    assert [g.cause for g in read_all_records(store)] == [Cause.TIME, Cause.OPENING]


def test_append_parent_is_a_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(StoreIOError) as exc:
        append_record(Game.now(Cause.OPENING), blocker / "sub" / "games.csv")

    assert exc.value.operation == "create directory"


def test_append_target_is_a_directory(tmp_path: Path):
    target = tmp_path / "games.csv"
    target.mkdir()

    with pytest.raises(StoreIOError) as exc:
        append_record(Game.now(Cause.OPENING), target)

    assert exc.value.operation == "open"
    assert exc.value.path == target


def test_read_missing_file(store: Path):
    with pytest.raises(StoreIOError) as exc:
        read_all_records(store)

    assert exc.value.operation == "open"
    assert str(store) in str(exc.value)
    assert not store.exists()


def test_read_applies_csv_quoting(store: Path):
    store.write_text('"2024-03-01T12:00:00+00:00","Time"\n')

    assert read_all_records(store) == [Game(occurred_at=T0, cause=Cause.TIME)]


def test_read_skips_empty_lines(store: Path):
    store.write_text("2024-03-01T12:00:00+00:00,Time\n\n2024-03-01T12:00:00+00:00,Opening\n")

    assert [g.cause for g in read_all_records(store)] == [Cause.TIME, Cause.OPENING]


def test_malformed_line_is_fatal(store: Path):
    store.write_text(
        "2024-03-01T12:00:00+00:00,Time\n"
        "2024-03-01T12:00:00+00:00,Tilt\n"
        "2024-03-01T12:00:00+00:00,Opening\n"
    )

    with pytest.raises(RecordParseError) as exc:
        read_all_records(store)

    assert exc.value.line == 2
    assert exc.value.path == store


def test_wrong_field_count_is_fatal(store: Path):
    store.write_text("2024-03-01T12:00:00+00:00,Time,Opening\n")

    with pytest.raises(RecordParseError, match="expected 2 fields"):
        read_all_records(store)


def test_partial_last_line_is_fatal(store: Path):
    store.write_text("2024-03-01T12:00:00+00:00,Time\n2024-03-01T12:0")

    with pytest.raises(RecordParseError):
        read_all_records(store)


def test_undecodable_bytes_are_fatal(store: Path):
    store.write_bytes(b"2024-03-01T12:00:00+00:00,Time\n2024-03-01T12:00:00+00:00,\xff\xfe\n")

    with pytest.raises(RecordParseError, match="not valid UTF-8") as exc:
        read_all_records(store)

    assert exc.value.path == store
    assert exc.value.line is None
