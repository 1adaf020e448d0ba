import logging
from typing import Annotated

import typer

from release_graph.cli.inspect import inspect
from release_graph.cli.render import render
from release_graph.cli.serve import serve_app
from release_graph.config import get_log_level

app = typer.Typer(
    name="release-graph",
    help="Release Graph CLI: inspect release tarballs and render their dependency graph.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("render")(render)
app.command("inspect")(inspect)
app.add_typer(serve_app, name="serve")


@app.callback()
def configure(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Logging level (default: $RELEASE_GRAPH_LOG_LEVEL or WARNING).")
    ] = None,
) -> None:
    level = (log_level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def main() -> None:
    app()
