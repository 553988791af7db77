"""New-zettel construction: filename, frontmatter and exclusive file creation."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml

from zk.errors import InvalidTitle, NoteAlreadyExists, NoteWriteError

logger = logging.getLogger("zk.writer")

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(title: str) -> str:
    """Replace each run of whitespace with a single hyphen; nothing else changes."""
    return _WHITESPACE_RE.sub("-", title)


def note_filename(title: str, date: str) -> str:
    return f"{date}-{slugify(title)}.md"


def _quote(value: str) -> str:
    # Double-quoted and unfolded, so non-printable characters come out escaped.
    dumped = yaml.safe_dump(value, default_style='"', allow_unicode=True, width=float("inf"))
    return dumped.splitlines()[0]


def render_note(title: str, zettel_id: str, body: str = "") -> str:
    """Render the file content: frontmatter, a blank line, then *body*."""
    return f"---\nuuid: {_quote(zettel_id)}\ntitle: {_quote(title)}\n---\n\n{body}"


def create_note(root: Path, title: str, date: str, zettel_id: str) -> str:
    """Write a new zettel under *root* and return its filename.

    Raises :class:`NoteAlreadyExists` rather than overwriting an existing file,
    and :class:`InvalidTitle` when the filename would leave *root*.
    """
    filename = note_filename(title, date)
    if Path(filename).name != filename or "\0" in filename:
        raise InvalidTitle(title, filename)
    path = Path(root) / filename
    try:
        with path.open("x", encoding="utf-8") as fh:
            fh.write(render_note(title, zettel_id))
    except FileExistsError:
        raise NoteAlreadyExists(path) from None
    except OSError as exc:
        raise NoteWriteError(path, exc.strerror or str(exc)) from exc
    logger.info("wrote zettel %s to %s", zettel_id, path)
    return filename
