from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from mind2doc.exceptions import UnknownFormatError
from ..core.models import MindMapSnapshot
from .json import JSONExporter
from .markdown import MarkdownExporter
from .plan import PlanExporter


@dataclass(frozen=True)
class ExportFormat:
    name: str
    label: str
    media_type: str
    extension: str
    encoder: Callable[[MindMapSnapshot, Optional[str]], str]
    name_segment: str = ""  # extra file-name segment placed before the date

    def encode(self, snapshot: MindMapSnapshot, scope_node_id: Optional[str] = None) -> str:
        return self.encoder(snapshot, scope_node_id)


FORMATS: Dict[str, ExportFormat] = {
    "json": ExportFormat(
        name="json",
        label="Export as JSON",
        media_type=JSONExporter.media_type,
        extension=".json",
        encoder=JSONExporter().export,
    ),
    "markdown": ExportFormat(
        name="markdown",
        label="Export as Markdown",
        media_type=MarkdownExporter.media_type,
        extension=".md",
        encoder=MarkdownExporter().export,
    ),
    "plan-feature": ExportFormat(
        name="plan-feature",
        label="Export for /plan-feature",
        media_type=PlanExporter.media_type,
        extension=".md",
        name_segment="plan",
        encoder=PlanExporter().export,
    ),
}

ALIASES: Dict[str, str] = {
    "md": "markdown",
    "plan": "plan-feature",
    "plan_feature": "plan-feature",
}


def get_format_names() -> List[str]:
    return list(FORMATS.keys())


def get_format(name: str | ExportFormat) -> ExportFormat:
    if isinstance(name, ExportFormat):
        return name
    key = (name or "").strip().lower()
    key = ALIASES.get(key, key)
    if key not in FORMATS:
        raise UnknownFormatError(
            f"Unknown export format '{name}'. Try one of: {', '.join(FORMATS)}"
            f" (aliases: {', '.join(sorted(ALIASES))})"
        )
    return FORMATS[key]


def encode(fmt: str | ExportFormat, snapshot: MindMapSnapshot, scope_node_id: Optional[str] = None) -> str:
    return get_format(fmt).encode(snapshot, scope_node_id)
