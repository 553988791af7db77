"""Core dataclasses: note records, index metadata and parsed frontmatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NoteRecord:
    """Index entry for a single zettel."""

    created: str
    modified: str
    #: Filename relative to the managed directory
    path: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NoteRecord":
        return cls(
            created=data["created"],
            modified=data["modified"],
            path=data["path"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "created": self.created,
            "modified": self.modified,
            "path": self.path,
        }


@dataclass
class IndexMeta:
    created: str
    modified: str

    def to_dict(self) -> dict[str, Any]:
        return {"created": self.created, "modified": self.modified}


@dataclass
class Frontmatter:
    """The identity fields read from a note's frontmatter block."""

    uuid: str
    title: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)
