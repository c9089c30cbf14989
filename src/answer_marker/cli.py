"""Console script for answer_marker."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import ConfigLoader, MarkingConfig
from .marking import InvalidInputError, MarkingEngine
from .utils import read_text, setup_logging
from .wire import HTTP_OK, MarkingResponse, handle_raw_request

CONFIG_ENV_VAR = "ANSWER_MARKER_CONFIG"

app = typer.Typer(help="Grade short answers against bullet-point mark schemes.")
console = Console()
err_console = Console(stderr=True)

_state: dict[str, MarkingConfig] = {}


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"YAML marking config (defaults to ${CONFIG_ENV_VAR})",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logging"),
):
    """Load settings shared by every command."""
    load_dotenv()
    setup_logging(level=logging.DEBUG if debug else logging.WARNING)

    config_path = config or os.environ.get(CONFIG_ENV_VAR)
    if config_path:
        try:
            _state["config"] = ConfigLoader().load_marking(config_path)
        except (FileNotFoundError, ValueError) as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(code=2)
    else:
        _state["config"] = MarkingConfig()


def _engine() -> MarkingEngine:
    return MarkingEngine(_state.get("config"))


@app.command()
def grade(
    scheme: Path = typer.Option(..., "--scheme", "-s", help="Mark scheme text file"),
    marks: int = typer.Option(..., "--marks", "-m", help="Marks available"),
    answer: Optional[str] = typer.Option(None, "--answer", "-a", help="Answer text"),
    answer_file: Optional[Path] = typer.Option(
        None, "--answer-file", "-f", help="File containing the answer ('-' for stdin)"
    ),
    question: str = typer.Option("", "--question", "-q", help="Question text"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON response"),
):
    """Grade one answer against a mark scheme."""
    if (answer is None) == (answer_file is None):
        err_console.print("[red]Error:[/red] provide exactly one of --answer or --answer-file")
        raise typer.Exit(code=2)

    try:
        scheme_text = read_text(scheme)
        answer_text = answer if answer is not None else read_text(answer_file)
    except FileNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    try:
        result = _engine().grade(answer_text, scheme_text, marks, question)
    except InvalidInputError as exc:
        err_console.print(f"[red]Invalid input:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    if as_json:
        response = MarkingResponse(
            success=True,
            marks_awarded=result.marks_awarded,
            feedback=result.feedback,
        )
        typer.echo(json.dumps(response.to_dict(), ensure_ascii=False))
        return

    console.print(escape(result.feedback), soft_wrap=True)


@app.command()
def respond(
    request_file: str = typer.Argument(..., help="JSON request file ('-' for stdin)"),
):
    """Answer a JSON marking request the way the marking endpoint does."""
    try:
        body = read_text(request_file)
    except FileNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    status, response = handle_raw_request(body, _engine())
    typer.echo(json.dumps(response, ensure_ascii=False))
    if status != HTTP_OK:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
