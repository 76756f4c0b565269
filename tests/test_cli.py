from __future__ import annotations

import pytest

from termboard.cli import main


def test_unknown_backend_exits_with_configuration_error(tmp_path, capsys):
    p = tmp_path / "config.yaml"
    p.write_text(
        "grid: {columns: [20], rows: [5]}\n"
        "widgets:\n"
        "  weather: {type: prettyweather, city: Berlin, backend: nope}\n",
        encoding="utf-8",
    )
    assert main(["--config", str(p)]) == 2
    assert "nope" in capsys.readouterr().err


def test_missing_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 2
    assert "Could not read" in capsys.readouterr().err


def test_renders_empty_dashboard(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("grid: {columns: [20], rows: [5]}\n", encoding="utf-8")
    assert main(["--config", str(p), "--renderer", "plain", "--log-level", "ERROR"]) == 0


@pytest.mark.parametrize(
    "yaml_text, message",
    [
        ("grid: {columns: [wide], rows: [5]}\n", "grid.columns"),
        ("grid: {columns: [-20], rows: [5]}\n", "negative"),
        ("http: {timeout: soon}\n", "http.timeout"),
        ("logging: 5\n", "logging"),
        ("widgets:\n  weather: {type: prettyweather, city: Berlin, timeout: soon}\n", "timeout"),
        ("widgets:\n  weather: {type: prettyweather, city: Berlin, position: {left: first}}\n", "position.left"),
    ],
)
def test_malformed_config_exits_with_configuration_error(tmp_path, capsys, yaml_text, message):
    p = tmp_path / "config.yaml"
    p.write_text(yaml_text, encoding="utf-8")
    assert main(["--config", str(p), "--renderer", "plain"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("termboard: ")
    assert message in err


def test_empty_sections_render(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("grid:\nlogging:\nhttp:\nwidgets:\n", encoding="utf-8")
    assert main(["--config", str(p), "--renderer", "plain"]) == 0
