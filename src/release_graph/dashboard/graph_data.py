"""Convert a release graph into Cytoscape elements and Plotly figures."""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go  # type: ignore[import-untyped]

from release_graph.core.graph import GraphNode, ReleaseGraph
from release_graph.dashboard.styles import edge_color, kind_color
from release_graph.models import ReleaseMetadata


def _node_element(node: GraphNode) -> dict[str, Any]:
    return {
        "data": {
            "id": node.id,
            "label": f"{node.name}\n{node.size_label}",
            "name": node.name,
            "size": node.size_label,
            "kind": node.kind,
            "color": kind_color(node.kind),
        }
    }


def release_graph_to_elements(graph: ReleaseGraph, edge_kinds: set[str] | None = None) -> list[dict[str, Any]]:
    """Turn a release graph into Cytoscape node + edge elements.

    Edge endpoints without a matching file node get a placeholder node of kind
    ``missing`` so Cytoscape can still draw the edge.
    """
    elements: list[dict[str, Any]] = [_node_element(node) for node in (*graph.packages, *graph.jobs)]
    known: set[str] = {node.id for node in (*graph.packages, *graph.jobs)}

    for edge in graph.edges:
        if edge_kinds is not None and edge.kind not in edge_kinds:
            continue
        for endpoint in (edge.source, edge.target):
            if endpoint not in known:
                known.add(endpoint)
                elements.append(
                    {
                        "data": {
                            "id": endpoint,
                            "label": endpoint,
                            "kind": "missing",
                            "color": kind_color("missing"),
                        }
                    }
                )
        elements.append(
            {
                "data": {
                    "source": edge.source,
                    "target": edge.target,
                    "kind": edge.kind,
                    "color": edge_color(edge.kind),
                }
            }
        )
    return elements


def release_statistics(metadata: ReleaseMetadata, graph: ReleaseGraph) -> dict[str, int]:
    return {
        "packages": len(metadata.package_files),
        "jobs": len(metadata.job_files),
        "edges": len(graph.edges),
        "total_size": sum(f.size for f in (*metadata.package_files, *metadata.job_files)),
    }


def file_sizes_to_figure(metadata: ReleaseMetadata) -> go.Figure:
    """Return a Plotly horizontal bar chart of package and job file sizes."""
    files = [("package", f) for f in metadata.package_files] + [("job", f) for f in metadata.job_files]
    if not files:
        fig = go.Figure()
        fig.update_layout(title="No data", height=300)
        return fig
    # Smallest first so the largest file ends up at the top
    files.sort(key=lambda item: item[1].size)
    fig = go.Figure(
        go.Bar(
            x=[f.size for _, f in files],
            y=[f"{kind}: {f.name}" for kind, f in files],
            text=[f.human_readable_size for _, f in files],
            orientation="h",
            marker_color=[kind_color(kind) for kind, _ in files],
        )
    )
    fig.update_layout(
        title="File Sizes",
        xaxis_title="Bytes",
        yaxis_title="File",
        height=max(300, len(files) * 25 + 100),
        margin={"l": 200, "r": 20, "t": 40, "b": 40},
    )
    return fig
