from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from release_graph.cli.common import load_release
from release_graph.models import ReleaseMetadata

console = Console()


def _packages_table(metadata: ReleaseMetadata) -> Table:
    declared = {p.name: p for p in metadata.manifest.packages}
    table = Table(title="Packages", show_lines=False)
    for h in ("name", "size", "version", "dependencies"):
        table.add_column(h)
    for f in metadata.package_files:
        decl = declared.get(f.name)
        table.add_row(
            f.name,
            f.human_readable_size,
            decl.version if decl else "",
            ", ".join(decl.dependencies) if decl else "",
        )
    return table


def _jobs_table(metadata: ReleaseMetadata) -> Table:
    table = Table(title="Jobs", show_lines=False)
    for h in ("file", "size", "job.MF name", "packages"):
        table.add_column(h)
    # job_files and job_manifests are filled in lockstep
    for f, job_manifest in zip(metadata.job_files, metadata.job_manifests, strict=True):
        table.add_row(f.name, f.human_readable_size, job_manifest.name, ", ".join(job_manifest.packages))
    return table


def inspect(
    path: Annotated[Path, typer.Argument(help="Path to the release tarball.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the extracted metadata as JSON.")] = False,
) -> None:
    """Show the files and manifests found in a release."""
    metadata = load_release(path)
    if as_json:
        typer.echo(metadata.model_dump_json(indent=2))
        return

    console.print(f"Release [bold]{metadata.manifest.name or '(unnamed)'}[/bold]")
    console.print(_packages_table(metadata))
    console.print(_jobs_table(metadata))
