"""Server CLI commands."""

import json

import requests
import typer
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from src.catalog.runtime.context import get_config

console = Console()

server_app = typer.Typer(help="🚀 Catalog server commands")


@server_app.command(name="start")
def start_server(
    host: str | None = typer.Option(None, help="Host to bind (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the catalog API under uvicorn.

    The product store lives in process memory, so every restart begins from
    the sample catalog (or an empty one when seeding is disabled).
    """
    import uvicorn

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            "[bold green]Starting Product Catalog API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{bind_host}:{bind_port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,  # Request logging middleware covers this
    )


@server_app.command(name="config")
def show_config() -> None:
    """📋 Print the effective configuration."""
    rendered = json.dumps(get_config().model_dump(), indent=2)
    console.print(Syntax(rendered, "json", theme="ansi_dark"))


@server_app.command(name="status")
def status(
    url: str | None = typer.Option(
        None, help="Base URL of a running server (defaults to app.base_url)"
    ),
    timeout: float = typer.Option(5.0, help="Request timeout in seconds"),
) -> None:
    """🩺 Query the readiness endpoint of a running server."""
    base_url = (url or get_config().app.base_url).rstrip("/")

    try:
        response = requests.get(f"{base_url}/health/ready", timeout=timeout)
    except requests.RequestException as e:
        console.print(f"[red]❌ Could not reach {base_url}: {e}[/red]")
        raise typer.Exit(1) from e

    body = response.json()
    if response.status_code != 200:
        console.print(f"[red]❌ Service not ready ({response.status_code})[/red]")
        console.print_json(data=body)
        raise typer.Exit(1)

    store = body.get("checks", {}).get("store", {})
    console.print(
        f"[green]✅ Ready[/green] ({body.get('environment')}) - "
        f"{store.get('products', 0)} products in store"
    )
