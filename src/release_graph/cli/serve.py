from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from release_graph.cli.common import load_release

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("dashboard")
def dashboard(
    path: Annotated[Path, typer.Argument(help="Path to the release tarball.")],
    host: str = "127.0.0.1",
    port: int = 8001,
) -> None:
    """Start the Dash web dashboard for one release."""
    from release_graph.dashboard.app import create_dashboard

    app = create_dashboard(load_release(path))
    console.print(f"[green]Starting dashboard on {host}:{port}[/green]")
    app.run(host=host, port=port)
