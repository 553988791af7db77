"""YAML-frontmatter reader for zettel files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from zk.errors import MalformedFrontmatter
from zk.note import Frontmatter

DELIMITER = "---"


def split_frontmatter(content: str) -> tuple[str, str]:
    """Return ``(frontmatter_text, body)`` bounded by the first two ``---`` lines.

    Raises :class:`MalformedFrontmatter` when fewer than two delimiter lines
    are present.
    """
    lines = content.splitlines(keepends=True)
    bounds = [i for i, line in enumerate(lines) if line.rstrip("\r\n") == DELIMITER][:2]
    if len(bounds) < 2:
        raise MalformedFrontmatter("missing frontmatter delimiter ---")
    start, end = bounds
    return "".join(lines[start + 1 : end]), "".join(lines[end + 1 :])


def parse_frontmatter(content: str) -> Frontmatter:
    """Extract ``uuid`` and ``title`` from a note's frontmatter block."""
    block, _ = split_frontmatter(content)
    try:
        meta: Any = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise MalformedFrontmatter(f"invalid frontmatter: {exc}") from exc
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise MalformedFrontmatter("frontmatter is not a mapping")

    zettel_id = meta.get("uuid")
    if zettel_id is None:
        raise MalformedFrontmatter("missing key 'uuid' in frontmatter")
    if not isinstance(zettel_id, str):
        raise MalformedFrontmatter("'uuid' in frontmatter is not a string")

    title = meta.get("title")
    return Frontmatter(
        uuid=zettel_id,
        title=None if title is None else str(title),
        fields=meta,
    )


def read_frontmatter(path: Path) -> Frontmatter:
    """Read *path* and parse its frontmatter; errors name the offending file."""
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedFrontmatter("not a UTF-8 text file", path=path) from exc
    try:
        return parse_frontmatter(content)
    except MalformedFrontmatter as exc:
        raise MalformedFrontmatter(exc.reason, path=path) from exc
