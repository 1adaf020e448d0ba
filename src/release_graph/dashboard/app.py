"""Dash application factory."""

from __future__ import annotations

import dash_cytoscape as cyto  # type: ignore[import-untyped]
from dash import Dash

from release_graph.dashboard.callbacks import register_callbacks
from release_graph.dashboard.layout import build_layout
from release_graph.models import ReleaseMetadata

cyto.load_extra_layouts()


def create_dashboard(metadata: ReleaseMetadata) -> Dash:
    app = Dash(__name__, suppress_callback_exceptions=True)
    app.layout = build_layout(metadata.manifest.name)
    register_callbacks(app, metadata)
    return app
