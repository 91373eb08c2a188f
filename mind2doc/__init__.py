"""mind2doc: export a mind map as JSON, a Markdown outline or a plan-feature document."""

__version__ = "0.1.0"

from mind2doc.pipeline.core.models import MindMapSnapshot, Node, Project
from mind2doc.pipeline.export import (
    build_artifact,
    decode_json,
    derive_file_name,
    encode_json,
    encode_markdown,
    encode_plan_document,
)

__all__ = [
    "MindMapSnapshot",
    "Node",
    "Project",
    "build_artifact",
    "decode_json",
    "derive_file_name",
    "encode_json",
    "encode_markdown",
    "encode_plan_document",
]
