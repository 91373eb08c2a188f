from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.artifacts import Artifact
from ..core.models import MindMapSnapshot
from .json import JSONExporter, encode_json, decode_json
from .markdown import MarkdownExporter, encode_markdown
from .plan import PlanExporter, encode_plan_document, resolve_scope
from .formats import ExportFormat, FORMATS, encode, get_format, get_format_names
from .naming import derive_file_name, project_slug


def build_artifact(
    snapshot: MindMapSnapshot,
    fmt: str | ExportFormat,
    day: date,
    scope_node_id: Optional[str] = None,
) -> Artifact:
    """Encode + name one artifact. Pure: no I/O, no clock."""
    export_format = get_format(fmt)
    return Artifact(
        text=export_format.encode(snapshot, scope_node_id),
        file_name=derive_file_name(snapshot.project.name, export_format, day),
        media_type=export_format.media_type,
    )


__all__ = [
    "Artifact",
    "ExportFormat",
    "FORMATS",
    "JSONExporter",
    "MarkdownExporter",
    "PlanExporter",
    "build_artifact",
    "decode_json",
    "derive_file_name",
    "encode",
    "encode_json",
    "encode_markdown",
    "encode_plan_document",
    "get_format",
    "get_format_names",
    "project_slug",
    "resolve_scope",
]
