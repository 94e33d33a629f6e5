"""CLI entry point for route-swagger."""

import logging
from pathlib import Path

import click

from route_swagger.config import load_config
from route_swagger.errors import SwaggerError
from route_swagger.formatter import FORMATS, format_document
from route_swagger.generator import Generator
from route_swagger.host import load_route_table


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every documented route.")
def main(verbose: bool):
    """route-swagger — build a Swagger 2.0 document from an application's routes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("app")
@click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML configuration file.")
@click.option("--filter", "route_filter", default=None, help="Only document routes whose URI starts with this prefix.")
@click.option("--format", "fmt", default="json", type=click.Choice(FORMATS), help="Output format.")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file; stdout when omitted.")
def generate(app: str, config_path: Path | None, route_filter: str | None, fmt: str, output: Path | None):
    """Generate the document for APP, given as 'module:attribute' of a RouteTable."""
    try:
        config = load_config(config_path)
        table = load_route_table(app)
        docs = Generator(config, table, route_filter).generate()
        text = format_document(docs.to_dict(), fmt)
    except SwaggerError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Documented {len(docs.paths)} paths in {output}", err=True)
