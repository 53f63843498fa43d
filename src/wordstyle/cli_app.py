import json
from typing import Optional

import typer

from wordstyle import StyleValueError, TableStyle
from wordstyle.config import create_logger

app = typer.Typer()


def _load_mapping(text: str, param_name: str) -> dict:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"not valid JSON: {e}", param_hint=param_name)
    if not isinstance(value, dict):
        raise typer.BadParameter("expected a JSON object", param_hint=param_name)
    return value


@app.command("wordstyle")
def main(
    table_style: str = typer.Argument("{}", help="Table style as a JSON object"),
    first_row: Optional[str] = typer.Option(None, help="First row style as a JSON object"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Reject invalid values. Defaults to the WORDSTYLE_STRICT setting"
    ),
):
    create_logger(stream=True)
    table_cfg = _load_mapping(table_style, "TABLE_STYLE")
    first_row_cfg = _load_mapping(first_row, "--first-row") if first_row is not None else None

    try:
        style = TableStyle(table_cfg, first_row_cfg, strict=strict)
    except StyleValueError as e:
        raise typer.BadParameter(str(e))

    typer.echo(json.dumps(style.as_dict(), indent=2))


if __name__ == "__main__":
    app()
