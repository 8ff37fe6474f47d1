import pytest
from click.testing import CliRunner

import handrange.config as config_module
from handrange.cli import main
from handrange.config import Config


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setattr(config_module, "_config", Config())
    return CliRunner()


class TestExpand:
    def test_basic(self, runner):
        result = runner.invoke(main, ["expand", "JJ+,**AKs**"])
        assert result.exit_code == 0
        assert "JJ" in result.output
        assert "Emphasized" in result.output
        assert "AKs" in result.output

    def test_ignored_tokens_listed(self, runner):
        result = runner.invoke(main, ["expand", "XY+,AA"])
        assert result.exit_code == 0
        assert "Ignored" in result.output
        assert "XY+" in result.output

    def test_strict_fails(self, runner):
        result = runner.invoke(main, ["expand", "--strict", "XY+,AA"])
        assert result.exit_code == 1
        assert "XY+" in result.output

    def test_strict_from_config(self, runner, monkeypatch):
        cfg = Config()
        cfg.parser.strict = True
        monkeypatch.setattr(config_module, "_config", cfg)
        result = runner.invoke(main, ["expand", "XY+"])
        assert result.exit_code == 1


class TestGrid:
    def test_grid(self, runner):
        result = runner.invoke(main, ["grid", "AA,**KK**"])
        assert result.exit_code == 0
        assert "AA" in result.output
        assert "72o" in result.output


class TestPresets:
    def test_list(self, runner):
        result = runner.invoke(main, ["presets"])
        assert result.exit_code == 0
        assert "BBvsBTN_2.5x" in result.output

    def test_show(self, runner):
        result = runner.invoke(main, ["presets", "BBvsUTG_2.5x"])
        assert result.exit_code == 0
        assert "tight" in result.output

    def test_unknown(self, runner):
        result = runner.invoke(main, ["presets", "nope"])
        assert result.exit_code == 1
