"""Errors raised while reading a release archive.

Every failure is terminal for the extraction call: callers get either a complete
``ReleaseMetadata`` or one of these, naming the stage and the archive entry involved.
"""

from __future__ import annotations

from typing import Literal

ManifestKind = Literal["release", "job"]


class ExtractionError(Exception):
    """Base class for all release extraction failures."""


class ArchiveOpenError(ExtractionError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot open release archive '{source}': {reason}")


class ArchiveReadError(ExtractionError):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Error reading release archive '{source}': {reason}")


class ManifestDecodeError(ExtractionError):
    def __init__(self, kind: ManifestKind, reason: str, entry_name: str | None = None) -> None:
        self.kind = kind
        self.reason = reason
        self.entry_name = entry_name
        document = "release.MF" if kind == "release" else "job.MF"
        where = f" in '{entry_name}'" if entry_name else ""
        super().__init__(f"Error decoding '{document}'{where}: {reason}")


class NestedArchiveOpenError(ExtractionError):
    def __init__(self, job_entry_name: str, reason: str) -> None:
        self.job_entry_name = job_entry_name
        self.reason = reason
        super().__init__(f"Cannot open job archive '{job_entry_name}': {reason}")


class NestedArchiveReadError(ExtractionError):
    def __init__(self, job_entry_name: str, reason: str) -> None:
        self.job_entry_name = job_entry_name
        self.reason = reason
        super().__init__(f"Error reading job archive '{job_entry_name}': {reason}")


class ComponentManifestNotFoundError(ExtractionError):
    def __init__(self, job_entry_name: str) -> None:
        self.job_entry_name = job_entry_name
        super().__init__(f"Did not find 'job.MF' in job archive '{job_entry_name}'")
