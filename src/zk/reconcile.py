"""Reconcile the index with zettels that were renamed on disk.

Identity lives in each note's frontmatter ``uuid``, not in its filename:
filenames embed a human title and are expected to change. Every file in the
managed directory is re-read, its ``uuid`` looked up in the index, and the
recorded ``path`` corrected when it no longer matches.

Files are visited in lexicographic order so that reported renames are
reproducible. ``meta.modified`` is advanced once per processed file, whether
or not that file moved.

The run is not transactional across files: a malformed note aborts it, but
renames reported before the abort have already been committed. A second file
declaring a tracked ``uuid`` seen earlier in the run aborts it the same way.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from zk.clock import Clock
from zk.config import INDEX_FILENAME
from zk.errors import DuplicateZettel
from zk.index import ZettelIndex
from zk.parser import read_frontmatter

logger = logging.getLogger("zk.reconcile")


@dataclass(frozen=True)
class Rename:
    zettel_id: str
    old_path: str
    new_path: str

    def __str__(self) -> str:
        return f"{self.old_path} -> {self.new_path}"


def scan_notes(root: Path, index_name: str = INDEX_FILENAME) -> Iterator[Path]:
    """Yield candidate note files in *root*, sorted by name.

    The index file (and its temporary sibling) and subdirectories are skipped.
    """
    for path in sorted(Path(root).iterdir(), key=lambda p: p.name):
        if path.name.startswith(index_name):
            continue
        if path.is_dir():
            logger.debug("skipping directory %s", path)
            continue
        yield path


def reconcile(
    index: ZettelIndex,
    root: Path,
    clock: Clock,
    *,
    index_name: str = INDEX_FILENAME,
    on_rename: Callable[[Rename], None] | None = None,
    commit: Callable[[ZettelIndex], None] | None = None,
) -> list[Rename]:
    """Point every tracked record at the file that currently carries its ``uuid``.

    Parameters
    ----------
    on_rename:
        Called with each detected :class:`Rename`, in scan order, as soon as
        it is applied.
    commit:
        Called with *index* after each applied rename so the change is
        persisted before the next file is read.

    Raises :class:`~zk.errors.MalformedFrontmatter` (naming the file) on the
    first note whose frontmatter cannot be read, and its subclass
    :class:`~zk.errors.DuplicateZettel` when a second file declares a tracked
    ``uuid`` already seen in this run.
    """
    renames: list[Rename] = []
    seen: dict[str, Path] = {}
    for path in scan_notes(root, index_name):
        fm = read_frontmatter(path)
        now = clock.timestamp()
        index.touch(now)

        if fm.uuid not in index:
            logger.debug("no record for %s (uuid %s); skipping", path.name, fm.uuid)
            continue

        if fm.uuid in seen:
            raise DuplicateZettel(fm.uuid, seen[fm.uuid], path)
        seen[fm.uuid] = path

        record = index.get_zettel(fm.uuid)
        if record.path == path.name:
            continue

        rename = Rename(fm.uuid, record.path, path.name)
        index.set_zettel_path(fm.uuid, path.name, now)
        logger.info("zettel %s moved: %s", fm.uuid, rename)
        renames.append(rename)
        if commit is not None:
            commit(index)
        if on_rename is not None:
            on_rename(rename)
    return renames
