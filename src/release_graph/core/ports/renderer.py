from typing import Protocol

from release_graph.core.graph import ReleaseGraph


class GraphRenderer(Protocol):
    def render(self, graph: ReleaseGraph) -> str: ...
