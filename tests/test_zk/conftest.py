"""Shared fixtures: a fixed clock and a small initialized zettel directory."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from zk.clock import Clock
from zk.index import IndexStore, ZettelIndex
from zk.note import NoteRecord

MY_NOTE_ID = "8918f638-7620-11ec-b116-00163e5e6c00"
OTHER_NOTE_ID = "c5a8e8c4-7625-11ec-9595-00163e5e6c00"


class FixedClock(Clock):
    """Clock that always reports the same instant; tests move it by assignment."""

    def __init__(self, timestamp: str, date: str) -> None:
        self._timestamp = timestamp
        self._date = date

    def set(self, timestamp: str, date: str) -> None:
        self._timestamp = timestamp
        self._date = date

    def timestamp(self) -> str:
        return self._timestamp

    def date(self) -> str:
        return self._date


def write_note(directory: Path, filename: str, content: str) -> Path:
    path = directory / filename
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def zettel_text(zettel_id: str, title: str) -> str:
    return f'---\nuuid: "{zettel_id}"\ntitle: "{title}"\n---\n\n'


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock("2022-01-01T05:00:00-03:00", "2022-01-01")


@pytest.fixture()
def store(tmp_path: Path) -> IndexStore:
    return IndexStore(tmp_path / "_zettel.json")


@pytest.fixture()
def zettel_dir(tmp_path: Path, store: IndexStore) -> Path:
    """Initialized directory tracking two zettels, both at their recorded paths."""
    index = ZettelIndex.empty("2022-01-01T05:00:00-03:00")
    index.upsert_zettel(
        MY_NOTE_ID,
        NoteRecord("2022-01-02T13:00:00-03:00", "2022-01-02T13:00:00-03:00", "2022-01-02-my-note.md"),
    )
    index.upsert_zettel(
        OTHER_NOTE_ID,
        NoteRecord("2022-01-03T16:20:00-03:00", "2022-01-03T16:20:00-03:00", "2022-01-03-another-note.md"),
    )
    index.touch("2022-01-03T16:20:00-03:00")
    store.save(index)
    write_note(tmp_path, "2022-01-02-my-note.md", zettel_text(MY_NOTE_ID, "my note"))
    write_note(tmp_path, "2022-01-03-another-note.md", zettel_text(OTHER_NOTE_ID, "another note"))
    return tmp_path
