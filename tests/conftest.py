"""Shared fixtures and helpers for tests."""

import io
import random
import tarfile
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent

# (path, data) pairs; data=None adds a directory entry
TarEntries = Sequence[tuple[str, bytes | None]]
TgzBuilder = Callable[[TarEntries], bytes]

DEMO_RELEASE_MF = b"""\
name: demo
packages:
- name: libA
  version: "1.0"
  fingerprint: fp-a
  sha1: sha-a
  dependencies:
  - libB
- name: libB
  version: "2.0"
  fingerprint: fp-b
  sha1: sha-b
  dependencies: []
jobs:
- name: worker
  version: "3.0"
  fingerprint: fp-w
  sha1: sha-w
"""

WORKER_JOB_MF = b"""\
name: worker
templates:
  ctl.erb: bin/ctl
packages:
- libA
"""


# ---------------------------------------------------------------------------
# Auto-marker: everything under tests/unit is a unit test
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Archive builders
# ---------------------------------------------------------------------------


def build_tgz(entries: TarEntries) -> bytes:
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, data in entries:
            info = tarfile.TarInfo(name)
            if data is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
            else:
                info.size = len(data)
                info.mode = 0o644
                tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


@pytest.fixture
def make_tgz() -> TgzBuilder:
    """Return a function building an in-memory tar.gz from (path, data) entries."""
    return build_tgz


@pytest.fixture
def random_payload() -> Callable[[int], bytes]:
    """Return a function producing incompressible, reproducible bytes."""
    rng = random.Random(1234)
    return rng.randbytes


@pytest.fixture
def worker_job_tgz() -> bytes:
    return build_tgz([("./job.MF", WORKER_JOB_MF), ("./templates/ctl.erb", b"#!/bin/sh\n")])


@pytest.fixture
def demo_release_bytes(worker_job_tgz: bytes) -> bytes:
    return build_tgz(
        [
            ("./", None),
            ("./release.MF", DEMO_RELEASE_MF),
            ("./packages", None),
            ("./packages/libA.tgz", b"a" * 10),
            ("./packages/libB.tgz", b"b" * 20),
            ("./jobs", None),
            ("./jobs/worker.tgz", worker_job_tgz),
            ("./LICENSE", b"license text"),
        ]
    )


@pytest.fixture
def demo_release_path(tmp_path: Path, demo_release_bytes: bytes) -> Path:
    path = tmp_path / "demo-release.tgz"
    path.write_bytes(demo_release_bytes)
    return path
