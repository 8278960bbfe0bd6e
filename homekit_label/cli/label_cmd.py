"""Label generation commands (generate, code, uri)"""

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config.schema import LabelSettings
from ..device.categories import category_name
from ..device.identifiers import format_mac, generate_mac, generate_setup_id
from ..errors import LabelError
from ..media.label import LabelRenderer, build_label_data
from ..pairing.codes import generate_setup_code, is_valid_setup_code
from ..pairing.uri import encode_setup_uri
from ..validation import (
    validate_category,
    validate_mac,
    validate_output_path,
    validate_password,
    validate_setup_id,
)

logger = logging.getLogger(__name__)
console = Console()


def _settings(ctx: typer.Context) -> LabelSettings:
    return ctx.obj if isinstance(ctx.obj, LabelSettings) else LabelSettings()


def _write_label(settings: LabelSettings, category: int, password: str, setup_id: str, mac: str, output: str) -> None:
    label = build_label_data(category, password, setup_id, mac)
    path = LabelRenderer(settings).save(label, output)
    console.print(f"\n[green]✓[/green] QR code label saved as: {escape(str(path))}")


def register_label_commands(app: typer.Typer):
    """Register label commands to the main app"""

    @app.command("generate")
    def generate(
        ctx: typer.Context,
        category: int = typer.Option(..., "--category", "-c", help="HomeKit category ID"),
        password: str = typer.Option(..., "--password", "-p", help="Setup password in format XXX-XX-XXX"),
        setup_id: str = typer.Option(..., "--setup-id", "-s", help="Setup ID: 4 alphanumeric characters (0-9, A-Z)"),
        mac: str = typer.Option(..., "--mac", "-m", help="MAC address: 12 hexadecimal characters"),
        output: str = typer.Option(..., "--output", "-o", help="Output image file path (PNG)"),
    ):
        """Generate a HomeKit QR code label with all parameters specified"""
        try:
            category = validate_category(category)
            password = validate_password(password)
            setup_id = validate_setup_id(setup_id)
            mac = validate_mac(mac)
            output = validate_output_path(output)

            if not is_valid_setup_code(password):
                logger.warning(f"Setup code {password} is easy to guess")
                console.print(f"[yellow]⚠[/yellow]  Setup code {password} is easy to guess")

            _write_label(_settings(ctx), category, password, setup_id, mac, output)
        except LabelError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    @app.command("code")
    def code(
        ctx: typer.Context,
        category: int = typer.Option(..., "--category", "-c", help="HomeKit category ID"),
        output: str = typer.Option(..., "--output", "-o", help="Output image file path (PNG)"),
        setup_id: str = typer.Option(None, "--setup-id", "-s", help="Setup ID (auto-generated if not provided)"),
        mac: str = typer.Option(None, "--mac", "-m", help="MAC address (auto-generated if not provided)"),
    ):
        """Generate a HomeKit QR code label with an auto-generated setup code"""
        settings = _settings(ctx)
        try:
            category = validate_category(category)
            output = validate_output_path(output)
            setup_id = validate_setup_id(setup_id) if setup_id else generate_setup_id()
            mac = validate_mac(mac) if mac else generate_mac()
            password = generate_setup_code(max_attempts=settings.max_code_attempts)

            table = Table(title="Generated HomeKit Setup Information", show_header=False)
            table.add_column("Field", style="cyan")
            table.add_column("Value", style="white")
            table.add_row("Setup Code", password)
            table.add_row("Setup ID", setup_id)
            table.add_row("MAC Address", format_mac(mac))
            table.add_row("Category", f"{category} ({category_name(category)})")
            console.print(table)

            _write_label(settings, category, password, setup_id, mac, output)
        except LabelError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    @app.command("uri")
    def uri(
        category: int = typer.Option(..., "--category", "-c", help="HomeKit category ID"),
        password: str = typer.Option(..., "--password", "-p", help="Setup password in format XXX-XX-XXX"),
        setup_id: str = typer.Option(..., "--setup-id", "-s", help="Setup ID: 4 alphanumeric characters (0-9, A-Z)"),
    ):
        """Print the setup URI encoded in the QR code"""
        try:
            category = validate_category(category)
            password = validate_password(password)
            setup_id = validate_setup_id(setup_id)
            typer.echo(encode_setup_uri(category, password, setup_id))
        except LabelError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
