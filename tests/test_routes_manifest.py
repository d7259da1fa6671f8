from pathlib import Path

import pytest

from api_doc_extractor.errors import ManifestError
from api_doc_extractor.parser.routes import load_routes

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadRoutes:
    def test_load_fixture_manifest(self):
        routes = load_routes(FIXTURES / "routes.yaml")
        assert len(routes) == 5
        assert routes[0].uri == "/api/users"
        assert routes[0].methods == ["GET"]
        assert routes[2].handler.member == "store"

    def test_json_manifest(self, tmp_path):
        f = tmp_path / "routes.json"
        f.write_text('{"routes": [{"uri": "/ping", "methods": ["GET"], "handler": "app:ping"}]}')
        routes = load_routes(f)
        assert routes[0].handler.module == "app"

    def test_missing_routes_key(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("endpoints: []\n")
        with pytest.raises(ManifestError, match="routes"):
            load_routes(f)

    def test_invalid_route(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("routes:\n  - uri: /ping\n    methods: [GET]\n")
        with pytest.raises(ManifestError, match="#0"):
            load_routes(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("routes: [unclosed\n")
        with pytest.raises(ManifestError):
            load_routes(f)
