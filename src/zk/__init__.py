"""zk: a flat directory of Markdown zettels plus a JSON metadata index."""

from zk.clock import Clock, new_id
from zk.config import ZkConfig, load_config
from zk.index import IndexStore, ZettelIndex
from zk.note import Frontmatter, IndexMeta, NoteRecord
from zk.parser import parse_frontmatter, read_frontmatter
from zk.reconcile import Rename, reconcile
from zk.writer import create_note, slugify

__all__ = [
    "Clock",
    "Frontmatter",
    "IndexMeta",
    "IndexStore",
    "NoteRecord",
    "Rename",
    "ZettelIndex",
    "ZkConfig",
    "create_note",
    "load_config",
    "new_id",
    "parse_frontmatter",
    "read_frontmatter",
    "reconcile",
    "slugify",
]
