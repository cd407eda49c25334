"""CLI entry point for swagger2har."""

import json
import logging
from fnmatch import fnmatchcase
from pathlib import Path
from urllib.parse import urlsplit

import click

from swagger2har.converter import convert_file
from swagger2har.exceptions import Swagger2HarError
from swagger2har.parser.base import HarRequest


def _load_requests(doc_path: Path, strict: bool, filters: tuple[str, ...]) -> list[HarRequest]:
    """Convert a document, turning library errors into CLI errors."""
    try:
        requests = convert_file(doc_path, strict=strict)
    except Swagger2HarError as e:
        raise click.ClickException(str(e)) from e
    if filters:
        requests = _filter_requests(requests, filters)
    return requests


def _filter_requests(requests: list[HarRequest], patterns: tuple[str, ...]) -> list[HarRequest]:
    """Keep requests matching any pattern.

    A pattern is either ``"METHOD PATH_GLOB"`` or just ``"PATH_GLOB"``; the glob
    is matched against the URL path with placeholders left in.
    """
    result = []
    for req in requests:
        path = urlsplit(req.url).path
        for pattern in patterns:
            method, _, glob = pattern.strip().rpartition(" ")
            if method and method.upper() != req.method.upper():
                continue
            if fnmatchcase(path, glob):
                result.append(req)
                break
    return result


@click.group(context_settings={"auto_envvar_prefix": "SWAGGER2HAR"})
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(verbose: bool):
    """swagger2har: generate HAR request entries from OpenAPI/Swagger docs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output JSON file (stdout if omitted).")
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indentation.")
@click.option("--filter", "filters", multiple=True, help="Only keep operations matching 'METHOD /path/*' or '/path/*'.")
@click.option("--strict", is_flag=True, help="Fail on documents that are neither Swagger 2.0 nor OpenAPI 3.x.")
def convert(doc_path: Path, output: Path | None, indent: int, filters: tuple[str, ...], strict: bool):
    """Convert an API document into a JSON array of HAR requests."""
    requests = _load_requests(doc_path, strict, filters)
    text = json.dumps([r.to_har() for r in requests], indent=indent, ensure_ascii=False)

    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Wrote {len(requests)} requests to {output}", err=True)


@main.command(name="list")
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("--filter", "filters", multiple=True, help="Only keep operations matching 'METHOD /path/*' or '/path/*'.")
def list_requests(doc_path: Path, filters: tuple[str, ...]):
    """Print one 'METHOD URL' line per operation."""
    requests = _load_requests(doc_path, False, filters)
    for req in requests:
        click.echo(f"{req.method.upper()} {req.url}")
    click.echo(f"Found {len(requests)} operations.", err=True)
