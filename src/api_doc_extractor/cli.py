"""CLI entry point for api-doc-extractor."""

import json
import logging
from pathlib import Path

import click
import yaml

from api_doc_extractor.config import load_config
from api_doc_extractor.errors import ExtractionError
from api_doc_extractor.extractor import RouteMetadataExtractor, extract_routes
from api_doc_extractor.introspection import PythonIntrospector
from api_doc_extractor.parser.base import RouteDescriptor
from api_doc_extractor.parser.routes import load_routes


def _dump(descriptors: list[RouteDescriptor], fmt: str) -> str:
    data = [d.model_dump(mode="json") for d in descriptors]
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Doc Extractor — build route documentation metadata from annotated handlers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("manifest_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the route descriptors.")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML configuration file.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--workers", default=None, type=click.IntRange(min=1), help="Routes processed in parallel.")
@click.option("--seed", default=None, type=int, help="Seed for generated example values.")
@click.option("--app-dir", "app_dirs", multiple=True, type=click.Path(exists=True, file_okay=False, path_type=Path), help="Directory to import handlers from.")
def extract(manifest_path: Path, output: Path, config_path: Path | None, fmt: str, workers: int | None, seed: int | None, app_dirs: tuple[Path, ...]):
    """Extract documentation metadata for every route in a manifest."""
    try:
        config = load_config(config_path)
        if workers is not None:
            config.workers = workers
        if seed is not None:
            config.seed = seed

        routes = load_routes(manifest_path)
        click.echo(f"Found {len(routes)} routes in {manifest_path}.")

        extractor = RouteMetadataExtractor(PythonIntrospector(list(app_dirs)), config)
        descriptors = extract_routes(extractor, routes, workers=config.workers)
    except ExtractionError as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_dump(descriptors, fmt), encoding="utf-8")
    click.echo(f"Route documentation saved to {output}")
