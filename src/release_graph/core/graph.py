"""Turn extracted release metadata into a renderer-neutral directed graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from release_graph.models import ReleaseFile, ReleaseMetadata

NodeKind = Literal["package", "job"]
EdgeKind = Literal["job_to_package", "package_to_package"]


@dataclass(frozen=True)
class GraphNode:
    id: str
    kind: NodeKind
    name: str
    size_label: str


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    kind: EdgeKind


@dataclass(frozen=True)
class ReleaseGraph:
    name: str
    packages: tuple[GraphNode, ...]
    jobs: tuple[GraphNode, ...]
    edges: tuple[GraphEdge, ...]


def package_node_id(name: str) -> str:
    return f"packages-{name}"


def job_node_id(name: str) -> str:
    return f"jobs-{name}"


def _file_nodes(files: tuple[ReleaseFile, ...], kind: NodeKind) -> tuple[GraphNode, ...]:
    make_id = package_node_id if kind == "package" else job_node_id
    return tuple(
        GraphNode(id=make_id(f.name), kind=kind, name=f.name, size_label=f.human_readable_size) for f in files
    )


def build_release_graph(metadata: ReleaseMetadata) -> ReleaseGraph:
    """Build nodes from the release files and edges from the job and release manifests.

    Names are matched as plain strings, so an edge may point at a node id that no
    file produced (a dangling dependency); renderers decide how to show those.
    """
    edges: list[GraphEdge] = []
    for job_manifest in metadata.job_manifests:
        for package in job_manifest.packages:
            edges.append(GraphEdge(job_node_id(job_manifest.name), package_node_id(package), "job_to_package"))

    for package_decl in metadata.manifest.packages:
        for dependency in package_decl.dependencies:
            edges.append(
                GraphEdge(package_node_id(package_decl.name), package_node_id(dependency), "package_to_package")
            )

    return ReleaseGraph(
        name=metadata.manifest.name,
        packages=_file_nodes(metadata.package_files, "package"),
        jobs=_file_nodes(metadata.job_files, "job"),
        edges=tuple(edges),
    )
