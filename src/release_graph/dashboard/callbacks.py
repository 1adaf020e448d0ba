"""Dash callback registrations."""

from __future__ import annotations

import logging
from typing import Any

from dash import Dash, Input, Output, html

from release_graph.core.graph import build_release_graph
from release_graph.core.helpers import human_readable_size
from release_graph.dashboard.graph_data import file_sizes_to_figure, release_graph_to_elements, release_statistics
from release_graph.models import ReleaseMetadata

_log = logging.getLogger(__name__)


def _details_list(rows: list[tuple[str, str]]) -> html.Dl:
    return html.Dl(
        [item for label, value in rows for item in (html.Dt(label, style={"fontWeight": "bold"}), html.Dd(value))]
    )


def node_details(metadata: ReleaseMetadata, node_data: dict[str, Any]) -> list[tuple[str, str]]:
    """Return (label, value) rows describing a tapped graph node."""
    kind = node_data.get("kind", "")
    name = node_data.get("name", "")
    rows: list[tuple[str, str]] = [("kind", kind), ("name", name or node_data.get("id", ""))]
    if "size" in node_data:
        rows.append(("size", node_data["size"]))

    if kind == "package":
        for package in metadata.manifest.packages:
            if package.name == name:
                rows += [
                    ("version", package.version),
                    ("fingerprint", package.fingerprint),
                    ("sha1", package.sha1),
                    ("dependencies", ", ".join(package.dependencies) or "-"),
                ]
                break
    elif kind == "job":
        for job in metadata.manifest.jobs:
            if job.name == name:
                rows += [("version", job.version), ("fingerprint", job.fingerprint), ("sha1", job.sha1)]
                break
        for job_manifest in metadata.job_manifests:
            if job_manifest.name == name:
                rows.append(("packages", ", ".join(job_manifest.packages) or "-"))
                break
    return rows


def register_callbacks(app: Dash, metadata: ReleaseMetadata) -> None:
    graph = build_release_graph(metadata)

    @app.callback(
        [
            Output("stat-packages", "children"),
            Output("stat-jobs", "children"),
            Output("stat-edges", "children"),
            Output("stat-size", "children"),
            Output("dashboard-error", "children"),
        ],
        Input("page-load", "data"),
    )
    def load_stats(_: Any) -> tuple[str, str, str, str, str]:
        try:
            stats = release_statistics(metadata, graph)
        except Exception as exc:
            _log.exception("load_stats failed")
            return ("Error", "Error", "Error", "Error", f"Failed to load statistics: {exc}")
        return (
            str(stats["packages"]),
            str(stats["jobs"]),
            str(stats["edges"]),
            human_readable_size(stats["total_size"]),
            "",
        )

    @app.callback(
        Output("release-graph", "elements"),
        Input("edge-kind-checklist", "value"),
    )
    def load_graph(edge_kinds: list[str] | None) -> list[dict[str, Any]]:
        try:
            return release_graph_to_elements(graph, set(edge_kinds or []))
        except Exception:
            _log.exception("load_graph failed")
            return []

    @app.callback(
        Output("file-size-chart", "figure"),
        Input("page-load", "data"),
    )
    def load_file_size_chart(_: Any) -> Any:
        return file_sizes_to_figure(metadata)

    @app.callback(
        Output("node-details-content", "children"),
        Input("release-graph", "tapNodeData"),
        prevent_initial_call=True,
    )
    def show_node_details(node_data: dict[str, Any] | None) -> Any:
        if not node_data:
            return "Click a node to see details."
        return _details_list(node_details(metadata, node_data))
