"""ZkConfig: where the managed directory and its index live.

Layout (everything flat, relative to the root):

    _zettel.json                  # metadata index
    2022-01-02-my-note.md         # zettels, one per file
    2022-01-03-another-note.md
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

INDEX_FILENAME = "_zettel.json"
DEFAULT_TITLE = "my note"
ROOT_ENV_VAR = "ZK_ROOT"


@dataclass
class ZkConfig:
    root: Path
    index_name: str = INDEX_FILENAME
    default_title: str = DEFAULT_TITLE

    @property
    def index_path(self) -> Path:
        return self.root / self.index_name

    @property
    def index_display(self) -> str:
        """Index path as shown to the user, relative to the root."""
        return f"./{self.index_name}"


def load_config(root: Path | str | None = None) -> ZkConfig:
    """Build a config for *root*, falling back to ``$ZK_ROOT`` and then the cwd."""
    if root is None:
        root = os.environ.get(ROOT_ENV_VAR, ".")
    return ZkConfig(root=Path(root))
