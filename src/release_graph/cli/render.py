import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from release_graph.cli.common import load_release
from release_graph.core.graph import ReleaseGraph, build_release_graph
from release_graph.render.dot import DotRenderer

console = Console(stderr=True)


class OutputFormat(str, Enum):
    dot = "dot"
    cytoscape = "cytoscape"


def _render_cytoscape(graph: ReleaseGraph) -> str:
    from release_graph.dashboard.graph_data import release_graph_to_elements

    return json.dumps(release_graph_to_elements(graph), indent=2) + "\n"


def render(
    path: Annotated[Path, typer.Argument(help="Path to the release tarball.")],
    output_format: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format.")] = OutputFormat.dot,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to a file instead of stdout.")] = None,
) -> None:
    """Render the release's package/job dependency graph."""
    graph = build_release_graph(load_release(path))
    text = DotRenderer().render(graph) if output_format == OutputFormat.dot else _render_cytoscape(graph)

    if output is None:
        typer.echo(text, nl=False)
        return
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Wrote[/green] {output_format.value} graph to {output}")
