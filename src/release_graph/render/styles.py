"""Graphviz attributes for release graphs.

Each function returns a fresh dict; nothing is shared between calls.
"""

from __future__ import annotations

from release_graph.core.graph import EdgeKind
from release_graph.render.helpers import escape_record_field


def cluster_attrs(name: str) -> dict[str, str]:
    return {
        "rank": "same",
        "color": "blue",
        "style": "rounded",
        "label": name,
        "fontsize": "32",
    }


def same_rank_attrs() -> dict[str, str]:
    return {"rank": "same"}


def node_attrs(name: str, size_label: str) -> dict[str, str]:
    return {
        "shape": "Mrecord",
        "style": "striped",
        "color": "#ff000022;0.3:blue:yellow",
        "label": f"{{ {escape_record_field(name)} | {escape_record_field(size_label)} }}",
        "fontsize": "16",
    }


def job_to_package_edge_attrs() -> dict[str, str]:
    return {
        "arrowhead": "vee",
        "tailport": "e",
        "headport": "_w",
    }


def package_to_package_edge_attrs() -> dict[str, str]:
    attrs = job_to_package_edge_attrs()
    attrs["headport"] = "_e"
    attrs["color"] = "red"
    attrs["constraint"] = "true"
    return attrs


def edge_attrs(kind: EdgeKind) -> dict[str, str]:
    if kind == "job_to_package":
        return job_to_package_edge_attrs()
    return package_to_package_edge_attrs()
