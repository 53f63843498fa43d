import json

from typer.testing import CliRunner

from wordstyle.cli_app import app

runner = CliRunner()


def test_cli_prints_resolved_style():
    result = runner.invoke(app, ['{"width": 500, "unit": "pct", "cellMargin": 80}', "--first-row", '{"bgColor": "FF0000"}'])

    assert result.exit_code == 0, result.output
    values = json.loads(result.output)
    assert values["width"] == 500
    assert values["unit"] == "pct"
    assert values["cell_margin_top"] == 80
    assert values["first_row"]["bg_color"] == "FF0000"
    assert values["first_row"]["cell_margin_top"] is None


def test_cli_default_style():
    result = runner.invoke(app, [])

    assert result.exit_code == 0, result.output
    values = json.loads(result.output)
    assert values["unit"] == "auto"
    assert values["first_row"] is None


def test_cli_lenient_ignores_bad_values():
    result = runner.invoke(app, ['{"width": "wide"}'])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["width"] == 0


def test_cli_strict_reports_bad_values():
    result = runner.invoke(app, ['{"width": "wide"}', "--strict"])

    assert result.exit_code == 2


def test_cli_rejects_malformed_json():
    result = runner.invoke(app, ["{width: 500}"])

    assert result.exit_code == 2


def test_cli_rejects_non_object_json():
    result = runner.invoke(app, ["[1, 2]"])

    assert result.exit_code == 2


def test_cli_strict_from_environment(monkeypatch):
    from wordstyle.config import get_settings

    monkeypatch.setenv("WORDSTYLE_STRICT", "1")
    get_settings.cache_clear()

    assert runner.invoke(app, ['{"width": "wide"}']).exit_code == 2

    result = runner.invoke(app, ['{"width": "wide"}', "--lenient"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["width"] == 0
