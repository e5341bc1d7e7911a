"""CLI entry point for tagtable. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from tagtable.columns import format_columns, parse_columns
from tagtable.config import get_config_path, load_config, save_config
from tagtable.outline import read_outline
from tagtable.table import render_table

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging verbosity (default: warning)",
)
@click.pass_context
def main(ctx, log_level):
    """Summarize tagged outline headings as a pipe table."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@main.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--columns", "-c", "spec", default=None, help="Column spec, e.g. '%25todo(Todo)|done'")
@click.option("--ellipsis", default=None, help="Marker appended to truncated headings")
@click.option("--align/--no-align", default=None, help="Pad columns so they line up")
def render(source, spec, ellipsis, align):
    """Render the headings of SOURCE (default: stdin) as a table."""
    config = load_config()
    spec = spec if spec is not None else config.columns
    if not spec:
        click.echo(
            "No column spec. Pass --columns or run 'tagtable config set-columns <spec>'.",
            err=True,
        )
        sys.exit(1)

    items = read_outline(source.read())
    logger.info("Read %d headings from %s", len(items), source.name)
    click.echo(render_table(
        parse_columns(spec),
        items,
        ellipsis=ellipsis if ellipsis is not None else config.ellipsis,
        align=align if align is not None else config.align,
    ))


@main.command()
@click.argument("spec")
@click.option("--normalize", is_flag=True, help="Print the spec with default fields dropped")
def columns(spec, normalize):
    """Show how SPEC is parsed, one column per line."""
    parsed = parse_columns(spec)
    if normalize:
        click.echo(format_columns(parsed))
        return
    for column in parsed:
        click.echo(f"{column.tag}\t{column.title}\t{column.max_length}")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@main.group(invoke_without_command=True)
@click.pass_context
def config(ctx):
    """Inspect or change stored defaults."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(config_show)


@config.command("show")
def config_show():
    """Print the stored defaults."""
    cfg = load_config()
    click.echo(f"Config: {get_config_path()}")
    click.echo(f"  columns:  {cfg.columns or '(none)'}")
    click.echo(f"  ellipsis: {cfg.ellipsis}")
    click.echo(f"  align:    {'yes' if cfg.align else 'no'}")


@config.command("set-columns")
@click.argument("spec")
def config_set_columns(spec):
    """Store SPEC as the default column spec."""
    cfg = load_config()
    cfg.columns = spec
    try:
        save_config(cfg)
    except OSError as e:
        raise click.ClickException(f"Error saving config: {e}") from e
    click.echo(f"Default columns: {cfg.columns}")


if __name__ == "__main__":
    main()
