"""Typer CLI for blind frame generation."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from blinds.application import BlindOutput, FrameEditor, GenerateBlindCommand
from blinds.application.config import (
    ConfigError,
    config_to_overrides,
    config_to_parameters,
    config_to_stock_length,
    load_config,
)
from blinds.cli.commands import validate_command
from blinds.domain import CoveringMaterial, FrameParameters
from blinds.domain.constants import DEFAULT_STOCK_LENGTH
from blinds.infrastructure import (
    CuttingPlanFormatter,
    JsonFormatter,
    LayoutFormatter,
    PieceListFormatter,
)

OUTPUT_FORMATS = ("all", "layout", "pieces", "plan", "json")

app = typer.Typer(
    name="blinds",
    help="Lay out wooden blind frames and plan their cuts from stock boards.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _build_editor(
    config_file: Path | None,
    cli_values: dict[str, Any],
) -> tuple[FrameEditor, float | None]:
    """Build an editing session from a config file and/or CLI options.

    CLI options win over config values. Changing the height or spacing this
    way drops the config's manual support positions, as in the editor.
    """
    changes = {key: value for key, value in cli_values.items() if value is not None}

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        editor = FrameEditor(config_to_parameters(config))
        editor.overrides.update(config_to_overrides(config))
        if changes:
            editor.update(**changes)
        return editor, config_to_stock_length(config)

    missing = [name for name in ("width", "height") if name not in changes]
    if missing:
        typer.echo(
            f"Error: --{' and --'.join(missing)} required without --config", err=True
        )
        raise typer.Exit(code=1)

    changes.setdefault("slat_height", 45.0)
    changes.setdefault("slat_depth", 20.0)
    changes.setdefault("support_spacing", 500.0)
    return FrameEditor(FrameParameters(**changes)), None


def _echo_output(result: BlindOutput, output_format: str) -> None:
    if output_format == "json":
        typer.echo(JsonFormatter().format(result))
        return

    if output_format in ("all", "layout") and result.layout is not None:
        typer.echo(LayoutFormatter().format(result.layout))
        typer.echo()
    if output_format in ("all", "pieces"):
        typer.echo(PieceListFormatter("BOARDS").format(result.board_pieces))
        typer.echo()
        if result.covering_pieces:
            typer.echo(PieceListFormatter("COVERING").format(result.covering_pieces))
            typer.echo()
    if output_format in ("all", "plan") and result.cutting_plan is not None:
        typer.echo(CuttingPlanFormatter().format(result.cutting_plan))


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Outer frame width"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Outer frame height"),
    ] = None,
    slat_height: Annotated[
        float | None,
        typer.Option("--slat-height", help="Board face dimension"),
    ] = None,
    slat_depth: Annotated[
        float | None,
        typer.Option("--slat-depth", help="Board thickness"),
    ] = None,
    spacing: Annotated[
        float | None,
        typer.Option("--spacing", help="Target spacing between supports"),
    ] = None,
    covering: Annotated[
        CoveringMaterial | None,
        typer.Option("--covering", help="Covering material: none, fabric, plywood"),
    ] = None,
    plywood_thickness: Annotated[
        float | None,
        typer.Option("--plywood-thickness", help="Plywood thickness"),
    ] = None,
    division_size: Annotated[
        float | None,
        typer.Option("--division-size", help="Spacing of division marks"),
    ] = None,
    stock_length: Annotated[
        float | None,
        typer.Option("--stock-length", help="Stock board length (default: 6000)"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: all, layout, pieces, plan, json"),
    ] = "all",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout and packing decisions"),
    ] = False,
) -> None:
    """Generate the layout, piece list and cutting plan of a blind frame."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    editor, config_stock_length = _build_editor(
        config_file,
        {
            "width": width,
            "height": height,
            "slat_height": slat_height,
            "slat_depth": slat_depth,
            "support_spacing": spacing,
            "covering_material": covering,
            "plywood_thickness": plywood_thickness,
            "division_size": division_size,
        },
    )

    if stock_length is None:
        stock_length = config_stock_length or DEFAULT_STOCK_LENGTH

    result = GenerateBlindCommand(layout_engine=editor.layout_engine).execute(
        editor.parameters, editor.overrides, stock_length=stock_length
    )

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    _echo_output(result, output_format)


if __name__ == "__main__":
    app()
