"""Dash layout: release stats, dependency graph and file size chart."""

from __future__ import annotations

import dash_cytoscape as cyto  # type: ignore[import-untyped]
from dash import dcc, html

from release_graph.dashboard.styles import RELEASE_STYLESHEET

EDGE_KIND_OPTIONS = [
    {"label": "Job uses package", "value": "job_to_package"},
    {"label": "Package depends on package", "value": "package_to_package"},
]


def _stat_card(card_id: str, title: str) -> html.Div:
    """Return a stat card placeholder."""
    return html.Div(
        [
            html.H4(title, style={"margin": "0", "color": "#666", "fontSize": "12px"}),
            html.Div("--", id=card_id, style={"fontSize": "24px", "fontWeight": "bold"}),
        ],
        style={
            "padding": "12px 20px",
            "border": "1px solid #ddd",
            "borderRadius": "8px",
            "minWidth": "120px",
            "textAlign": "center",
        },
    )


def build_layout(release_name: str) -> html.Div:
    """Return the top-level Dash layout.

    A hidden dcc.Store fires the initial data-loading callbacks reliably.
    """
    return html.Div(
        [
            dcc.Store(id="page-load", data="ready"),
            html.H1(f"Release: {release_name or '(unnamed)'}"),
            html.Div(id="dashboard-error", style={"color": "red"}),
            html.Div(
                [
                    _stat_card("stat-packages", "Packages"),
                    _stat_card("stat-jobs", "Jobs"),
                    _stat_card("stat-edges", "Dependencies"),
                    _stat_card("stat-size", "Total Size"),
                ],
                style={"display": "flex", "gap": "16px", "marginBottom": "20px", "flexWrap": "wrap"},
            ),
            dcc.Checklist(
                id="edge-kind-checklist",
                options=EDGE_KIND_OPTIONS,
                value=[option["value"] for option in EDGE_KIND_OPTIONS],
                inline=True,
                style={"marginBottom": "12px"},
            ),
            html.Div(
                [
                    cyto.Cytoscape(
                        id="release-graph",
                        elements=[],
                        layout={
                            "name": "dagre",
                            "rankDir": "LR",
                            "animate": False,
                            "nodeSep": 50,
                            "rankSep": 120,
                            "fit": True,
                        },
                        style={"width": "100%", "height": "600px", "border": "1px solid #ddd", "borderRadius": "8px"},
                        stylesheet=RELEASE_STYLESHEET,
                    ),
                    html.Div(
                        [
                            html.H4("Node Details", style={"marginTop": "0"}),
                            html.Div(id="node-details-content", children="Click a node to see details."),
                        ],
                        style={
                            "minWidth": "280px",
                            "maxWidth": "320px",
                            "padding": "12px",
                            "border": "1px solid #ddd",
                            "borderRadius": "8px",
                            "overflowY": "auto",
                            "maxHeight": "600px",
                        },
                    ),
                ],
                style={"display": "flex", "gap": "16px"},
            ),
            html.H3("File Sizes", style={"marginTop": "24px", "marginBottom": "8px"}),
            dcc.Graph(id="file-size-chart", figure={}),
        ],
        style={"padding": "20px", "fontFamily": "system-ui, sans-serif"},
    )
