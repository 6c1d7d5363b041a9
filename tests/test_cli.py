"""
Tests for CLI commands — generate, check, and global options.
"""

import json
import textwrap
from pathlib import Path

import yaml
from click.testing import CliRunner

from appsetgen.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "ApplicationSet" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenerateCommand:
    def test_generate_yaml(self, appset_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--quiet", "--config", str(appset_yml), "generate"])
        assert result.exit_code == 0
        docs = list(yaml.safe_load_all(result.output))
        assert docs == [{
            "generator": 0,
            "kind": "list",
            "params": [
                {"cluster": "engineering-dev", "url": "https://1.2.3.4"},
                {"cluster": "engineering-prod", "url": "https://2.4.6.8", "values.project": "prod"},
            ],
        }]

    def test_generate_json(self, appset_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(appset_yml), "generate", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["appset"] == "guestbook"
        assert data["param_count"] == 2

    def test_generate_go_template(self, tmp_path: Path):
        config = tmp_path / "appset.yml"
        config.write_text(textwrap.dedent("""\
            metadata:
              name: nested
            spec:
              goTemplate: true
              generators:
                - list:
                    elements:
                      - cluster: prod
                        values:
                          replicas: 3
                    elementsYaml: |
                      - cluster: staging
        """))
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "generate", "--json"])
        assert result.exit_code == 0
        params = json.loads(result.output)["generators"][0]["params"]
        assert params == [
            {"cluster": "prod", "values": {"replicas": 3}},
            {"cluster": "staging"},
        ]

    def test_generate_type_mismatch(self, tmp_path: Path):
        config = tmp_path / "appset.yml"
        config.write_text(textwrap.dedent("""\
            spec:
              generators:
                - list:
                    elements:
                      - replicas: 3
        """))
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "generate"])
        assert result.exit_code == 1
        assert "replicas" in result.output

    def test_generate_date_keyed_element(self, tmp_path: Path):
        config = tmp_path / "appset.yml"
        config.write_text(textwrap.dedent("""\
            spec:
              generators:
                - list:
                    elements:
                      - 2024-01-15: release
        """))
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "generate", "--json"])
        assert result.exit_code == 0
        params = json.loads(result.output)["generators"][0]["params"]
        assert params == [{"2024-01-15": "release"}]

    def test_generate_missing_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["generate"])
        assert result.exit_code == 1
        assert "No appset.yml" in result.output

    def test_generate_missing_config_json(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["generate", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False


class TestCheckCommand:
    def test_check_valid(self, appset_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(appset_yml), "check"])
        assert result.exit_code == 0
        assert "valid" in result.output
        assert "guestbook" in result.output

    def test_check_invalid(self, tmp_path: Path):
        config = tmp_path / "appset.yml"
        config.write_text("spec:\n  generators:\n    - {}\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "check"])
        assert result.exit_code == 1
        assert "no generator kind" in result.output

    def test_check_json(self, appset_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(appset_yml), "check", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["generator_count"] == 1
