"""Planning-document export ("plan-feature" format).

The document frames one problem and breaks it down:

    Feature: <title>

    Description: <description>

    ## Sub-Features

    ### <child>
    <child description>

    **Components:**
    - <grandchild>: <description>
      - <great-grandchild>: <description>

With a resolvable scope node id, the scope node is the framing and its
children are the sub-features; nothing above or beside it is rendered.
Without one (or when the id is unknown) the project is the framing and the
roots are the sub-features.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from mind2doc.utils.tree_helper import escape_block_markers, normalize_newlines, one_line
from ..core.models import MindMapSnapshot, Node
from .markdown import UNTITLED_PROJECT, node_title


def resolve_scope(
    snapshot: MindMapSnapshot, scope_node_id: Optional[str] = None
) -> Tuple[str, str, Sequence[Node]]:
    """Return (framing title, framing description, breakdown nodes)."""
    scope = snapshot.find(scope_node_id)
    if scope is not None:
        return node_title(scope), scope.description or "", scope.children
    project = snapshot.project
    return one_line(project.name) or UNTITLED_PROJECT, project.description, snapshot.roots


def _component_line(node: Node, depth: int) -> str:
    title = node_title(node)
    desc = one_line(node.description)
    return f"{'  ' * depth}- {title}: {desc}" if desc else f"{'  ' * depth}- {title}"


def encode_plan_document(snapshot: MindMapSnapshot, scope_node_id: Optional[str] = None) -> str:
    title, description, breakdown = resolve_scope(snapshot, scope_node_id)

    lines: List[str] = [f"Feature: {title}", ""]
    body = escape_block_markers(normalize_newlines(description)).strip()
    if body:
        lines.extend([f"Description: {body}", ""])

    if breakdown:
        lines.extend(["## Sub-Features", ""])
        for feature in breakdown:
            lines.append(f"### {node_title(feature)}")
            feature_body = escape_block_markers(normalize_newlines(feature.description)).strip()
            if feature_body:
                lines.append(feature_body)
            lines.append("")
            if feature.children:
                lines.append("**Components:**")
                for child in feature.children:
                    lines.extend(_component_line(n, d) for d, n in child.walk())
                lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


class PlanExporter:
    media_type = "text/markdown"

    def export(self, snapshot: MindMapSnapshot, scope_node_id: str | None = None) -> str:
        return encode_plan_document(snapshot, scope_node_id)
