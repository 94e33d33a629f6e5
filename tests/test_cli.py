import json
import sys
from pathlib import Path
from unittest.mock import patch

import yaml
from click.testing import CliRunner

from route_swagger.cli import main
from route_swagger.errors import InvalidAuthFlowError

FIXTURES = Path(__file__).parent / "fixtures"
APP = "route_stubs.app:table"


class TestCliGenerate:
    def test_json_to_stdout(self, tmp_path):
        # docstring warnings would go to stderr; keep the output pure JSON
        config_file = tmp_path / "swagger.yaml"
        config_file.write_text("parseDocBlock: false\n")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", APP, "-c", str(config_file)])

        assert result.exit_code == 0
        docs = json.loads(result.output)
        assert docs["swagger"] == "2.0"
        assert "/users/{id}" in docs["paths"]

    def test_yaml_to_file_with_config(self, tmp_path):
        output_file = tmp_path / "out" / "swagger.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", APP,
            "-c", str(FIXTURES / "swagger.yaml"),
            "--format", "yaml",
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        docs = yaml.safe_load(output_file.read_text(encoding="utf-8"))
        assert docs["info"]["title"] == "Stub API"
        assert docs["basePath"] == "/v1"
        assert docs["schemes"] == ["https"]

    def test_app_module_in_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / "cwd_stub_app.py").write_text(
            "from route_swagger.host import RouteRecord, RouteTable\n"
            "table = RouteTable(routes=[RouteRecord(uri='health', methods=['GET'])])\n"
        )
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "path", [p for p in sys.path if p not in ("", str(tmp_path))])
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "cwd_stub_app:table"])

        assert result.exit_code == 0
        assert list(json.loads(result.output)["paths"]) == ["/health"]

    def test_filter(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", APP, "--filter", "/api"])

        assert result.exit_code == 0
        assert set(json.loads(result.output)["paths"]) == {"/api", "/api/store"}

    def test_bad_app_reference(self):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "no_such_module:table"])

        assert result.exit_code == 1
        assert "Cannot import" in result.output

    def test_invalid_auth_flow(self, tmp_path):
        config_file = tmp_path / "swagger.yaml"
        config_file.write_text("authFlow: clientCredentials\n")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", APP, "-c", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid OAuth flow" in result.output

    @patch("route_swagger.cli.Generator")
    def test_generator_errors_reported(self, MockGen):
        MockGen.return_value.generate.side_effect = InvalidAuthFlowError("Invalid OAuth flow 'x'")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", APP])

        assert result.exit_code == 1
        assert "Invalid OAuth flow 'x'" in result.output
