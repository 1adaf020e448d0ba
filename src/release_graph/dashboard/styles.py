"""Dashboard Cytoscape stylesheet and node-kind color mappings."""

from __future__ import annotations

from typing import Any

KIND_COLORS: dict[str, str] = {
    "package": "#F1E05A",
    "job": "#3572A5",
}

EDGE_COLORS: dict[str, str] = {
    "job_to_package": "#90CAF9",
    "package_to_package": "#E34C26",
}

_DEFAULT_COLOR = "#888888"


def kind_color(kind: str) -> str:
    """Return hex color for a node kind; unknown kinds (dangling references) are grey."""
    return KIND_COLORS.get(kind, _DEFAULT_COLOR)


def edge_color(kind: str) -> str:
    return EDGE_COLORS.get(kind, _DEFAULT_COLOR)


RELEASE_STYLESHEET: list[dict[str, Any]] = [
    {
        "selector": "node",
        "style": {
            "label": "data(label)",
            "font-size": "10px",
            "text-valign": "center",
            "text-halign": "center",
            "text-wrap": "wrap",
            "shape": "round-rectangle",
            "background-color": "data(color)",
            "width": 110,
            "height": 40,
        },
    },
    {
        "selector": "node[kind = 'missing']",
        "style": {
            "border-width": 2,
            "border-style": "dashed",
            "border-color": "#555555",
        },
    },
    {
        "selector": "node:selected",
        "style": {
            "border-width": 3,
            "border-color": "#FF5722",
        },
    },
    {
        "selector": "edge",
        "style": {
            "curve-style": "bezier",
            "target-arrow-shape": "vee",
            "line-color": "data(color)",
            "target-arrow-color": "data(color)",
            "width": 2,
        },
    },
]
