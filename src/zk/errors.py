"""Exceptions raised by the zk library.

Every error is terminal for the command that triggered it; the CLI turns
them into a one-line diagnostic and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class ZkError(Exception):
    """Base class for all zk errors."""


class IndexAlreadyExists(ZkError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"index already exists at {path}")
        self.path = path


class IndexNotFound(ZkError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"no index found at {path}; run `zk init` first")
        self.path = path


class CorruptIndex(ZkError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"index at {path} is unreadable: {reason}")
        self.path = path


class NoteAlreadyExists(ZkError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"note already exists: {path}")
        self.path = path


class MalformedFrontmatter(ZkError):
    """A note's frontmatter block is missing, unparsable, or has no ``uuid``."""

    def __init__(self, reason: str, path: Path | None = None) -> None:
        msg = f"{path}: {reason}" if path is not None else reason
        super().__init__(msg)
        self.reason = reason
        self.path = path


class UnknownZettel(ZkError):
    def __init__(self, zettel_id: str) -> None:
        super().__init__(f"no zettel with id {zettel_id}")
        self.zettel_id = zettel_id


class InvalidTitle(ZkError):
    """A title whose filename would not be a plain entry of the managed directory."""

    def __init__(self, title: str, filename: str) -> None:
        super().__init__(f"title {title!r} does not give a plain filename: {filename!r}")
        self.title = title
        self.filename = filename


class NoteWriteError(ZkError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not write note {path}: {reason}")
        self.path = path


class DuplicateZettel(MalformedFrontmatter):
    """Two files in the managed directory declare the same tracked ``uuid``."""

    def __init__(self, zettel_id: str, first: Path, second: Path) -> None:
        super().__init__(f"uuid {zettel_id} is also declared by {first.name}", path=second)
        self.zettel_id = zettel_id
        self.first = first
