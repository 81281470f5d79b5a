"""
cli.py

PURPOSE: Command-line interface for inspecting and converting text components.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- decode: Decode a JSON component file and show its flattened segments
- preview: Render a JSON component file with terminal styling
- legacy: Convert a legacy-coded string to JSON
- plain: Print the unformatted text of a JSON component file

Library errors (bad JSON, disabled capabilities) are reported in red and
exit with status 1.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from typewheel import __version__
from typewheel.codec.json import JsonCodec
from typewheel.codec.legacy import LegacyCodec
from typewheel.config import get_settings
from typewheel.errors import TypewheelError
from typewheel.models.component import Component
from typewheel.ui import console as ui

app = typer.Typer(
    name="typewheel",
    help="Inspect and convert Minecraft-style text components.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"typewheel version {__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send library log records to stderr through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Typewheel - Build, style and convert text components."""
    configure_logging(get_settings().log_level)


def _load(component_file: Path) -> Component:
    """Decode a JSON component file, exiting with status 1 on failure."""
    try:
        return JsonCodec().loads(component_file.read_text(encoding="utf-8"))
    except TypewheelError as e:
        ui.print_error(f"Cannot decode {component_file}: {e}")
        raise typer.Exit(1) from None


ComponentFile = Annotated[
    Path,
    typer.Argument(
        help="Path to a JSON text component file",
        exists=True,
        readable=True,
        dir_okay=False,
    ),
]


@app.command()
def decode(component_file: ComponentFile) -> None:
    """Decode a JSON component and show its flattened segments."""
    ui.print_segments(_load(component_file))


@app.command()
def preview(component_file: ComponentFile) -> None:
    """Render a JSON component with terminal styling."""
    ui.print_component(_load(component_file))


@app.command()
def plain(component_file: ComponentFile) -> None:
    """Print the unformatted text of a JSON component."""
    ui.print_message(_load(component_file).plain_text())


@app.command()
def legacy(
    text: Annotated[
        str,
        typer.Argument(help="Text containing legacy formatting codes"),
    ],
    ampersand: Annotated[
        bool,
        typer.Option(
            "--ampersand",
            "-a",
            help="Treat '&' as the control character instead of '§'",
        ),
    ] = False,
    indent: Annotated[
        int | None,
        typer.Option(
            "--indent",
            "-i",
            help="Pretty-print the JSON with this indent",
        ),
    ] = None,
) -> None:
    """Convert a legacy-coded string to a JSON component."""
    codec = LegacyCodec.AMPERSAND if ampersand else LegacyCodec.SECTION
    component = codec.decode(text)

    try:
        output = JsonCodec().dumps(component, indent=indent)
    except TypewheelError as e:
        ui.print_error(str(e))
        raise typer.Exit(1) from None

    ui.print_message(output)


if __name__ == "__main__":
    app()
