"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from rdf_mud.cli import main
from rdf_mud.config import get_settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fresh_settings():
    """Reload settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestCLI:
    """Smoke tests for each CLI command."""

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_stats(self, runner):
        result = runner.invoke(main, ["stats"])
        assert result.exit_code == 0
        assert "Triples" in result.output
        assert "Rooms" in result.output

    def test_export_turtle(self, runner):
        result = runner.invoke(main, ["export"])
        assert result.exit_code == 0
        assert "Entrance Hall" in result.output
        assert "mud:" in result.output

    def test_export_uses_configured_format(self, runner, monkeypatch, fresh_settings):
        monkeypatch.setenv("RDF_MUD_DEFAULT_FORMAT", "n-triples")
        result = runner.invoke(main, ["export"])
        assert result.exit_code == 0
        assert "<http://example.org/game/room-1>" in result.output

    def test_invalid_configured_format(self, runner, monkeypatch, fresh_settings):
        monkeypatch.setenv("RDF_MUD_DEFAULT_FORMAT", "json-ld")
        result = runner.invoke(main, ["export"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_export_n_triples_to_file(self, runner, tmp_path):
        out = tmp_path / "world.nt"
        result = runner.invoke(main, ["export", "--format", "n-triples", "--output", str(out)])
        assert result.exit_code == 0
        assert "<http://example.org/game/room-1>" in out.read_text()

    def test_convert(self, runner, tmp_path):
        source = tmp_path / "people.ttl"
        source.write_text(
            '@prefix foaf: <http://xmlns.com/foaf/0.1/> .\n'
            '<http://example.org/alice> foaf:name "Alice" .\n'
        )
        result = runner.invoke(main, ["convert", str(source), "--to", "n-triples"])
        assert result.exit_code == 0
        assert '<http://example.org/alice> <http://xmlns.com/foaf/0.1/name> "Alice"' in result.output

    def test_convert_bad_input(self, runner, tmp_path):
        source = tmp_path / "broken.ttl"
        source.write_text("<http://example.org/alice> <http://example.org/knows>\n")
        result = runner.invoke(main, ["convert", str(source)])
        assert result.exit_code == 1
        assert "Could not parse" in result.output

    def test_play(self, runner):
        result = runner.invoke(main, ["play"], input="take lamp\ninventory\nquit\n")
        assert result.exit_code == 0
        assert "Entrance Hall" in result.output
        assert "You take the oil lamp." in result.output
        assert "Goodbye" in result.output
