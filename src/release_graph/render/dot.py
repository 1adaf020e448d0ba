"""Render a ``ReleaseGraph`` as Graphviz DOT source."""

from __future__ import annotations

import logging

from release_graph.config import GraphSettings, get_graph_settings
from release_graph.core.graph import GraphNode, ReleaseGraph
from release_graph.render.helpers import to_dot_attrs, to_dot_id
from release_graph.render.styles import cluster_attrs, edge_attrs, node_attrs, same_rank_attrs

logger = logging.getLogger(__name__)

_INDENT = "\t"


def _attr_lines(attrs: dict[str, str], depth: int) -> list[str]:
    pad = _INDENT * depth
    return [f"{pad}{key}={to_dot_id(attrs[key])};" for key in sorted(attrs)]


def _cluster_lines(cluster: str, nodes: tuple[GraphNode, ...]) -> list[str]:
    lines = [f"{_INDENT}subgraph {to_dot_id(f'cluster_{cluster}')} {{"]
    lines += _attr_lines(cluster_attrs(cluster), 2)
    lines.append(f"{_INDENT * 2}subgraph {to_dot_id(f'same_rank_{cluster}')} {{")
    lines += _attr_lines(same_rank_attrs(), 3)
    for node in nodes:
        lines.append(f"{_INDENT * 3}{to_dot_id(node.id)} {to_dot_attrs(node_attrs(node.name, node.size_label))};")
    lines.append(f"{_INDENT * 2}}}")
    lines.append(f"{_INDENT}}}")
    return lines


class DotRenderer:
    """Lay out packages and jobs as two clusters with dependency edges between them."""

    def __init__(self, settings: GraphSettings | None = None) -> None:
        self._settings = settings or get_graph_settings()

    def render(self, graph: ReleaseGraph) -> str:
        header = f"digraph {to_dot_id(graph.name)} {{" if graph.name else "digraph {"
        lines = [header]
        lines += _attr_lines(
            {
                "rankdir": self._settings.rankdir,
                "nodesep": self._settings.nodesep,
                "ranksep": self._settings.ranksep,
            },
            1,
        )
        lines += _cluster_lines("packages", graph.packages)
        lines += _cluster_lines("jobs", graph.jobs)
        for edge in graph.edges:
            attrs = to_dot_attrs(edge_attrs(edge.kind))
            lines.append(f"{_INDENT}{to_dot_id(edge.source)} -> {to_dot_id(edge.target)} {attrs};")
        lines.append("}")

        logger.debug(
            "Rendered DOT graph %r: %d package(s), %d job(s), %d edge(s)",
            graph.name,
            len(graph.packages),
            len(graph.jobs),
            len(graph.edges),
        )
        return "\n".join(lines) + "\n"
