"""Category listing command"""

import typer
from rich.console import Console
from rich.table import Table

from ..device.categories import list_categories

console = Console()


def register_category_commands(app: typer.Typer):
    """Register category commands to the main app"""

    @app.command("list-categories")
    def list_categories_cmd():
        """List all available HomeKit categories"""
        table = Table(title="Available HomeKit Categories")
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Name", style="white")

        for category_id, name in list_categories():
            table.add_row(str(category_id), name)

        console.print(table)
