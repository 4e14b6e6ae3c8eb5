"""Command-line entrypoints for SimpUNIFAC."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from simpunifac import __version__
from simpunifac.errors import InputFileError, OutputFileError, SimpUnifacError
from simpunifac.pipeline import Pipeline
from simpunifac.thermo import MODELS, ActivityModel

app = typer.Typer(add_completion=False, help="Activity coefficients from UNIFAC group documents.")

logger = logging.getLogger(__name__)


class DocumentFormat(str, Enum):
    auto = "auto"
    yaml = "yaml"
    json = "json"


class ModelName(str, Enum):
    unifac = "unifac"
    ideal = "ideal"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )


def _resolve_format(path: Path, fmt: DocumentFormat) -> str:
    if fmt is DocumentFormat.auto:
        return "json" if path.suffix.lower() == ".json" else "yaml"
    return fmt.value


def _build_model(name: ModelName) -> ActivityModel:
    return MODELS[name.value]()


def _fail(exc: SimpUnifacError) -> NoReturn:
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=exc.exit_code)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"simpunifac {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_show_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Activity coefficients from UNIFAC group documents."""


@app.command()
def run(
    input_file: Annotated[
        Path, typer.Argument(help="Path to the mixture document (YAML or JSON).")
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the result here instead of stdout."),
    ] = None,
    fmt: Annotated[
        DocumentFormat,
        typer.Option("--format", help="Document format; 'auto' picks JSON for .json files."),
    ] = DocumentFormat.auto,
    model: Annotated[
        ModelName,
        typer.Option(envvar="SIMPUNIFAC_MODEL", help="Activity model to compute with."),
    ] = ModelName.unifac,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log pipeline stages to stderr.")
    ] = False,
) -> None:
    """Compute activity coefficients for every substance in a document."""
    _configure_logging(verbose)
    doc_format = _resolve_format(input_file, fmt)

    try:
        text = input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Reading %s failed: %s", input_file, exc)
        _fail(InputFileError(f"Input file {input_file} could not be read"))

    pipeline = Pipeline(_build_model(model))
    try:
        result = pipeline.run(text, doc_format)
    except SimpUnifacError as exc:
        _fail(exc)

    if output is None:
        typer.echo(result, nl=False)
        return

    try:
        output.write_text(result, encoding="utf-8")
    except OSError as exc:
        logger.debug("Writing %s failed: %s", output, exc)
        _fail(OutputFileError(f"Output file {output} could not be written"))


@app.command()
def groups(
    model: Annotated[
        ModelName,
        typer.Option(envvar="SIMPUNIFAC_MODEL", help="Activity model whose groups to list."),
    ] = ModelName.unifac,
) -> None:
    """List the functional-group ids the model accepts."""
    for group in _build_model(model).describe_groups():
        typer.echo(f"{group.id:>4}  {group.name:<12} {group.main_group}")
