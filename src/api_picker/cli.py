"""CLI entry point for api-picker."""

import logging
from pathlib import Path

import click

from api_picker.generator.report import build_report
from api_picker.parser.base import ApiOperation
from api_picker.parser.loader import DocumentLoadError, load_source
from api_picker.parser.swagger import (
    extract_operations,
    filter_operations,
    match_operations,
    select_operations,
)


def _load_operations(source: str, timeout: float | None) -> tuple[dict, list[ApiOperation]]:
    """Load the document and extract its operations, as a CLI error on failure."""
    try:
        doc = load_source(source, timeout=timeout)
    except DocumentLoadError as e:
        raise click.ClickException(str(e)) from e
    return doc, extract_operations(doc)


def _describe(op: ApiOperation) -> str:
    tag = op.tags[0] if op.tags else ""
    return tag + (f" / {op.summary}" if op.summary else "")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """API Picker: pick operations from an OpenAPI/Swagger document and export their fields."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("list")
@click.argument("source")
@click.option("-s", "--search", default=None, help="Only show operations matching path / method / summary / tag.")
@click.option("--timeout", default=None, type=float, help="Timeout in seconds when SOURCE is a URL.")
def list_operations(source: str, search: str | None, timeout: float | None):
    """List the operations in SOURCE (a file path or http(s) URL)."""
    _, operations = _load_operations(source, timeout)
    visible = filter_operations(operations, search)

    for op in visible:
        click.echo(f"{op.method.upper():<8}{op.path}  {_describe(op)}".rstrip())
        click.echo(f"        id: {op.id}")

    if search:
        click.echo(f"{len(visible)} of {len(operations)} operations match '{search}'.")
    else:
        click.echo(f"Found {len(operations)} operations.")


@main.command()
@click.argument("source")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the report to this file instead of stdout.")
@click.option("-s", "--search", default=None, help="Restrict the candidates to operations matching this search.")
@click.option("--id", "op_ids", multiple=True, help="Operation id to export (repeatable), as shown by 'list'.")
@click.option("--select", "patterns", multiple=True, help="Pattern like 'POST /pets' or '/pets/*' (repeatable).")
@click.option("--all", "select_all", is_flag=True, help="Export every candidate operation.")
@click.option("--timeout", default=None, type=float, help="Timeout in seconds when SOURCE is a URL.")
def export(
    source: str,
    output: Path | None,
    search: str | None,
    op_ids: tuple[str, ...],
    patterns: tuple[str, ...],
    select_all: bool,
    timeout: float | None,
):
    """Export request/response fields of the chosen operations as text."""
    doc, operations = _load_operations(source, timeout)
    candidates = filter_operations(operations, search)

    if select_all:
        chosen = candidates
    else:
        selected = {op_id: True for op_id in op_ids}
        selected.update({op.id: True for op in match_operations(candidates, patterns)})
        chosen = select_operations(candidates, selected)

    if not chosen:
        raise click.UsageError("No operations selected. Use --id, --select or --all.")

    report = build_report(doc, chosen)

    if output is None:
        click.echo(f"Exporting {len(chosen)} of {len(operations)} operations.", err=True)
        click.echo(report)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report + "\n", encoding="utf-8")
    click.echo(f"Exported {len(chosen)} operations to {output}")
