"""Main CLI application module."""

import typer

from .server_commands import server_app

# Create the main CLI application
app = typer.Typer(
    help="🛒 Product Catalog CLI - run and inspect the catalog service",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(server_app, name="server")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
