"""Read a release archive (tar.gz with nested job tar.gz files) into ``ReleaseMetadata``.

The outer archive is streamed once, forward-only. Every failure aborts the whole
extraction; no partially populated metadata is ever returned.
"""

from __future__ import annotations

import contextlib
import gzip
import io
import os
import tarfile
import zlib
from collections.abc import Callable, Iterator
from typing import BinaryIO

from release_graph.core.errors import (
    ArchiveOpenError,
    ArchiveReadError,
    ComponentManifestNotFoundError,
    ExtractionError,
    NestedArchiveOpenError,
    NestedArchiveReadError,
)
from release_graph.core.manifest import decode_component_manifest, decode_release_manifest
from release_graph.models import ComponentManifest, ReleaseFile, ReleaseManifest, ReleaseMetadata

RELEASE_MANIFEST_PATH = "./release.MF"
PACKAGES_PREFIX = "./packages"
JOBS_PREFIX = "./jobs"
JOB_MANIFEST_PREFIX = "./job.MF"

_DRAIN_CHUNK_SIZE = 64 * 1024

# Errors the gzip/tar readers raise on bad or truncated input.
_ARCHIVE_ERRORS = (tarfile.TarError, OSError, EOFError, zlib.error)

ReleaseSource = str | os.PathLike[str] | BinaryIO
ErrorFactory = Callable[[str], ExtractionError]


def _source_name(source: ReleaseSource) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return str(getattr(source, "name", "<stream>"))


@contextlib.contextmanager
def _open_source(source: ReleaseSource, name: str) -> Iterator[BinaryIO]:
    """Yield a binary handle; handles opened here are closed here, caller streams are left open."""
    if not isinstance(source, (str, os.PathLike)):
        yield source
        return
    try:
        handle = open(source, "rb")  # noqa: SIM115
    except OSError as exc:
        raise ArchiveOpenError(name, str(exc)) from exc
    with handle:
        yield handle


@contextlib.contextmanager
def _open_tgz(fileobj: BinaryIO, open_error: ErrorFactory) -> Iterator[tuple[gzip.GzipFile, tarfile.TarFile]]:
    with gzip.GzipFile(fileobj=fileobj, mode="rb") as gz:
        try:
            # Opening reads the gzip header and the first tar header.
            tar = tarfile.open(fileobj=gz, mode="r|")
        except _ARCHIVE_ERRORS as exc:
            raise open_error(str(exc)) from exc
        with tar:
            yield gz, tar


def _iter_members(tar: tarfile.TarFile, read_error: ErrorFactory) -> Iterator[tarfile.TarInfo]:
    members = iter(tar)
    while True:
        try:
            member = next(members)
        except StopIteration:
            return
        except _ARCHIVE_ERRORS as exc:
            raise read_error(str(exc)) from exc
        yield member


def _read_member(tar: tarfile.TarFile, member: tarfile.TarInfo, read_error: ErrorFactory) -> bytes:
    try:
        handle = tar.extractfile(member)
        if handle is None:
            raise read_error(f"'{member.name}' is not a regular file")
        data = handle.read()
    except _ARCHIVE_ERRORS as exc:
        raise read_error(f"reading '{member.name}': {exc}") from exc
    if len(data) != member.size:
        raise read_error(f"short read of '{member.name}': expected {member.size} bytes, got {len(data)}")
    return data


def _drain(gz: gzip.GzipFile, read_error: ErrorFactory) -> None:
    # Reading to the end verifies the gzip trailer (CRC and length).
    try:
        while gz.read(_DRAIN_CHUNK_SIZE):
            pass
    except _ARCHIVE_ERRORS as exc:
        raise read_error(str(exc)) from exc


def extract_component_manifest(job_entry_name: str, data: bytes) -> ComponentManifest:
    """Decode the job.MF embedded in one job archive.

    The first regular entry under ``./job.MF`` wins; the rest of the archive is not read.
    """

    def open_error(reason: str) -> ExtractionError:
        return NestedArchiveOpenError(job_entry_name, reason)

    def read_error(reason: str) -> ExtractionError:
        return NestedArchiveReadError(job_entry_name, reason)

    with _open_tgz(io.BytesIO(data), open_error) as (_, tar):
        for member in _iter_members(tar, read_error):
            if not member.isreg() or not member.name.startswith(JOB_MANIFEST_PREFIX):
                continue
            return decode_component_manifest(_read_member(tar, member, read_error), job_entry_name)

    raise ComponentManifestNotFoundError(job_entry_name)


def extract_release_metadata(source: ReleaseSource) -> ReleaseMetadata:
    """Walk a release archive and collect its manifest, package files, job files and job manifests.

    ``source`` is a filesystem path or a readable binary stream. Raises an
    ``ExtractionError`` subclass on any failure.
    """
    name = _source_name(source)

    def open_error(reason: str) -> ExtractionError:
        return ArchiveOpenError(name, reason)

    def read_error(reason: str) -> ExtractionError:
        return ArchiveReadError(name, reason)

    manifest = ReleaseManifest()
    package_files: list[ReleaseFile] = []
    job_files: list[ReleaseFile] = []
    job_manifests: list[ComponentManifest] = []

    with _open_source(source, name) as fileobj, _open_tgz(fileobj, open_error) as (gz, tar):
        for member in _iter_members(tar, read_error):
            if not member.isreg():
                continue

            if member.name == RELEASE_MANIFEST_PATH:
                manifest = decode_release_manifest(_read_member(tar, member, read_error), member.name)
            elif member.name.startswith(PACKAGES_PREFIX):
                package_files.append(ReleaseFile(path=member.name, size=member.size))
            elif member.name.startswith(JOBS_PREFIX):
                job_manifest = extract_component_manifest(member.name, _read_member(tar, member, read_error))
                job_files.append(ReleaseFile(path=member.name, size=member.size))
                job_manifests.append(job_manifest)

        _drain(gz, read_error)

    return ReleaseMetadata(
        manifest=manifest,
        package_files=tuple(package_files),
        job_files=tuple(job_files),
        job_manifests=tuple(job_manifests),
    )
