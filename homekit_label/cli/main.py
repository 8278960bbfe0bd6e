"""homekit-label command line entry point"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ..config.loader import load_config
from ..errors import ConfigError
from .category_cmd import register_category_commands
from .label_cmd import register_label_commands

console = Console()

app = typer.Typer(
    name="homekit-label",
    help="Generate HomeKit QR code labels with device information.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(
        None,
        "--config",
        help="Config file (JSON/JSON5); defaults to ./homekit-label.json or ~/.homekit-label/config.json",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Generate HomeKit QR code labels with device information"""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )

    try:
        ctx.obj = load_config(config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


register_label_commands(app)
register_category_commands(app)


if __name__ == "__main__":
    app()
