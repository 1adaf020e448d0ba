from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from release_graph.core.helpers import file_name_from_path, human_readable_size


class _ManifestModel(BaseModel):
    """Base for documents decoded from release.MF / job.MF."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        # `key:` with no value means the same as a missing key
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None and v != ""}
        return data


# release.MF


class PackageDeclaration(_ManifestModel):
    name: str = ""
    sha1: str = ""
    fingerprint: str = ""
    version: str = ""
    dependencies: tuple[str, ...] = ()


class JobDeclaration(_ManifestModel):
    name: str = ""
    sha1: str = ""
    fingerprint: str = ""
    version: str = ""


class ReleaseManifest(_ManifestModel):
    name: str = ""
    packages: tuple[PackageDeclaration, ...] = ()
    jobs: tuple[JobDeclaration, ...] = ()


# job.MF


class ComponentManifest(_ManifestModel):
    name: str = ""
    packages: tuple[str, ...] = ()


class ReleaseFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    size: int

    @property
    def name(self) -> str:
        return file_name_from_path(self.path)

    @property
    def human_readable_size(self) -> str:
        return human_readable_size(self.size)


class ReleaseMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    manifest: ReleaseManifest = ReleaseManifest()
    package_files: tuple[ReleaseFile, ...] = ()
    job_files: tuple[ReleaseFile, ...] = ()
    job_manifests: tuple[ComponentManifest, ...] = ()
