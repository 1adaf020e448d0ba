import os
from dataclasses import dataclass


@dataclass(frozen=True)
class GraphSettings:
    rankdir: str = "LR"
    nodesep: str = "0.5"
    ranksep: str = "2"


def get_graph_settings() -> GraphSettings:
    return GraphSettings(
        rankdir=os.getenv("RELEASE_GRAPH_RANKDIR", "LR"),
        nodesep=os.getenv("RELEASE_GRAPH_NODESEP", "0.5"),
        ranksep=os.getenv("RELEASE_GRAPH_RANKSEP", "2"),
    )


def get_log_level() -> str:
    return os.getenv("RELEASE_GRAPH_LOG_LEVEL", "WARNING").upper()
