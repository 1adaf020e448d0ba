import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from release_graph.core.errors import ExtractionError
from release_graph.core.extract import extract_release_metadata
from release_graph.models import ReleaseMetadata

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


def load_release(path: Path) -> ReleaseMetadata:
    """Extract release metadata, exiting with status 1 on a missing file or a broken archive."""
    if not path.exists():
        err_console.print(f"[red]File '{escape(str(path))}' does not exist![/red]", soft_wrap=True)
        raise typer.Exit(1)

    try:
        metadata = extract_release_metadata(path)
    except ExtractionError as exc:
        logger.debug("Extraction of %s failed", path, exc_info=True)
        err_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(1) from exc

    logger.info(
        "Extracted %s: %d package file(s), %d job file(s)",
        path,
        len(metadata.package_files),
        len(metadata.job_files),
    )
    return metadata
