"""Route manifest loader.

A manifest lists the routes to document::

    routes:
      - uri: /users/{id}
        methods: [GET, HEAD]
        handler: app.controllers:UserController.show
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from api_doc_extractor.errors import ManifestError
from api_doc_extractor.parser.base import Route


def load_routes(file_path: Path) -> list[Route]:
    """Parse a YAML (or JSON) route manifest into a list of Route."""
    try:
        doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ManifestError(f"{file_path}: {e}") from e

    if not isinstance(doc, dict) or not isinstance(doc.get("routes"), list):
        raise ManifestError(f"{file_path}: expected a top-level 'routes' list")

    routes = []
    for index, item in enumerate(doc["routes"]):
        try:
            routes.append(Route(**item))
        except (TypeError, ValueError, ValidationError) as e:
            raise ManifestError(f"{file_path}: route #{index} is invalid: {e}") from e
    return routes
