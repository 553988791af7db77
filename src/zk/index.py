"""ZettelIndex: the JSON metadata index and its on-disk store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from zk.errors import CorruptIndex, IndexAlreadyExists, IndexNotFound, UnknownZettel
from zk.note import IndexMeta, NoteRecord

logger = logging.getLogger("zk.index")


class ZettelIndex:
    """In-memory copy of ``_zettel.json``: index metadata plus one record per zettel."""

    def __init__(self, meta: IndexMeta, zettels: dict[str, NoteRecord] | None = None) -> None:
        self.meta = meta
        self.zettels: dict[str, NoteRecord] = zettels if zettels is not None else {}

    @classmethod
    def empty(cls, now: str) -> "ZettelIndex":
        return cls(IndexMeta(created=now, modified=now))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ZettelIndex":
        meta = data["meta"]
        return cls(
            meta=IndexMeta(created=meta["created"], modified=meta["modified"]),
            zettels={zid: NoteRecord.from_dict(rec) for zid, rec in data["zettels"].items()},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "zettels": {zid: rec.to_dict() for zid, rec in self.zettels.items()},
        }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def touch(self, now: str) -> None:
        """Advance ``meta.modified``."""
        self.meta.modified = now

    def upsert_zettel(self, zettel_id: str, record: NoteRecord) -> None:
        """Insert or replace the record for *zettel_id*.

        Callers follow this with :meth:`touch`; both land in the same save.
        """
        self.zettels[zettel_id] = record

    def set_zettel_path(self, zettel_id: str, new_path: str, now: str) -> None:
        record = self.get_zettel(zettel_id)
        record.path = new_path
        record.modified = now

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def get_zettel(self, zettel_id: str) -> NoteRecord:
        try:
            return self.zettels[zettel_id]
        except KeyError:
            raise UnknownZettel(zettel_id) from None

    def __contains__(self, zettel_id: object) -> bool:
        return zettel_id in self.zettels


class IndexStore:
    """Reads and writes a :class:`ZettelIndex` at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    @property
    def _tmp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def load(self) -> ZettelIndex:
        if not self.path.exists():
            raise IndexNotFound(self.path)
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
            return ZettelIndex.from_dict(data)
        except json.JSONDecodeError as exc:
            raise CorruptIndex(self.path, str(exc)) from exc
        except (KeyError, TypeError, AttributeError) as exc:
            raise CorruptIndex(self.path, f"unexpected structure ({exc!r})") from exc

    def save(self, index: ZettelIndex) -> None:
        """Write to a sibling tmp file, then rename over the index."""
        tmp = self._tmp_path
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(index.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
        tmp.replace(self.path)
        logger.debug("saved index (%d zettels) to %s", len(index.zettels), self.path)

    def init(self, now: str) -> ZettelIndex:
        """Create an empty index; never overwrites an existing one."""
        if self.path.exists():
            raise IndexAlreadyExists(self.path)
        index = ZettelIndex.empty(now)
        self.save(index)
        logger.info("initialized index at %s", self.path)
        return index
