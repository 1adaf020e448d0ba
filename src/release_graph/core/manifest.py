"""Decode release.MF and job.MF documents."""

from __future__ import annotations

from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from release_graph.core.errors import ManifestDecodeError, ManifestKind
from release_graph.models import ComponentManifest, ReleaseManifest

_M = TypeVar("_M", bound=BaseModel)

_TYPED_SCALAR_TAGS = frozenset(
    {
        "tag:yaml.org,2002:bool",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:null",
        "tag:yaml.org,2002:timestamp",
    }
)


class _TextScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as their source text (``1.10`` stays ``"1.10"``)."""


_TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TYPED_SCALAR_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _load_mapping(data: bytes, kind: ManifestKind, entry_name: str | None) -> dict[str, Any]:
    try:
        document = yaml.load(data, Loader=_TextScalarLoader)
    except yaml.YAMLError as exc:
        raise ManifestDecodeError(kind, f"invalid YAML: {exc}", entry_name) from exc

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ManifestDecodeError(kind, f"expected a mapping, got {type(document).__name__}", entry_name)
    return document


def _decode(model: type[_M], data: bytes, kind: ManifestKind, entry_name: str | None) -> _M:
    document = _load_mapping(data, kind, entry_name)
    try:
        return model.model_validate(document)
    except ValidationError as exc:
        raise ManifestDecodeError(kind, str(exc), entry_name) from exc


def decode_release_manifest(data: bytes, entry_name: str | None = None) -> ReleaseManifest:
    """Decode a release.MF document. Missing fields decode to empty values."""
    return _decode(ReleaseManifest, data, "release", entry_name)


def decode_component_manifest(data: bytes, entry_name: str | None = None) -> ComponentManifest:
    """Decode a job.MF document. Missing fields decode to empty values."""
    return _decode(ComponentManifest, data, "job", entry_name)
