"""zk CLI: zettel index bookkeeping.

Commands:
    zk init               create _zettel.json in the managed directory
    zk new [TITLE]        create a dated zettel and record it in the index
    zk update             reconcile the index with renamed zettels
    zk path UUID          print the recorded path of a zettel
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import click

from zk.clock import Clock, new_id
from zk.config import ROOT_ENV_VAR, ZkConfig, load_config
from zk.errors import ZkError
from zk.index import IndexStore
from zk.note import NoteRecord
from zk.reconcile import Rename, reconcile
from zk.writer import create_note

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@dataclass
class Session:
    """Per-invocation collaborators; tests pass their own via ``obj=``."""

    clock: Clock = field(default_factory=Clock)
    new_id: Callable[[], str] = new_id
    config: ZkConfig | None = None


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _session(ctx: click.Context) -> tuple[Session, ZkConfig]:
    session = ctx.find_object(Session)
    if session is None or session.config is None:
        raise click.UsageError("run this command through the zk group", ctx)
    return session, session.config


class _ZkGroup(click.Group):
    """Report library errors as ``Error: ...`` with exit status 1."""

    def invoke(self, ctx: click.Context):  # type: ignore[override]
        try:
            return super().invoke(ctx)
        except ZkError as exc:
            raise click.ClickException(str(exc)) from exc


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(cls=_ZkGroup)
@click.version_option(package_name="zk-index")
@click.option(
    "--root-dir",
    envvar=ROOT_ENV_VAR,
    default=".",
    show_default=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory holding the zettels and _zettel.json",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, root_dir: Path, verbose: bool) -> None:
    """zk: minimal zettel index."""
    _configure_logging(verbose)
    session = ctx.ensure_object(Session)
    session.config = load_config(root_dir)


# ---------------------------------------------------------------------------
# zk init
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create an empty index in the managed directory."""
    session, cfg = _session(ctx)
    IndexStore(cfg.index_path).init(session.clock.timestamp())
    # Wording (spelling included) matches what existing zk scripts grep for.
    click.echo(f"initalized new zk metadatabase at {cfg.index_display}")


# ---------------------------------------------------------------------------
# zk new
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("title", required=False)
@click.pass_context
def new(ctx: click.Context, title: str | None) -> None:
    """Create a new zettel titled TITLE (default: "my note")."""
    session, cfg = _session(ctx)
    store = IndexStore(cfg.index_path)
    index = store.load()

    now = session.clock.timestamp()
    zettel_id = session.new_id()
    filename = create_note(
        cfg.root,
        title if title is not None else cfg.default_title,
        session.clock.date(),
        zettel_id,
    )
    index.upsert_zettel(zettel_id, NoteRecord(created=now, modified=now, path=filename))
    index.touch(now)
    store.save(index)
    click.echo(f"created a new zettel at {filename}")


# ---------------------------------------------------------------------------
# zk update
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def update(ctx: click.Context) -> None:
    """Sync the index with zettels that were renamed."""
    session, cfg = _session(ctx)
    store = IndexStore(cfg.index_path)
    index = store.load()

    def _report(rename: Rename) -> None:
        click.echo(str(rename))

    reconcile(
        index,
        cfg.root,
        session.clock,
        index_name=cfg.index_name,
        on_rename=_report,
        commit=store.save,
    )
    store.save(index)


# ---------------------------------------------------------------------------
# zk path
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("zettel_id", metavar="UUID")
@click.pass_context
def path(ctx: click.Context, zettel_id: str) -> None:
    """Print the recorded path of the zettel with id UUID."""
    _, cfg = _session(ctx)
    record = IndexStore(cfg.index_path).load().get_zettel(zettel_id)
    click.echo(record.path)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
