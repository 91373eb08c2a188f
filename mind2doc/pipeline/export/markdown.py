from __future__ import annotations
from typing import List, Optional

from mind2doc.utils.tree_helper import escape_block_markers, normalize_newlines, one_line
from ..core.models import MindMapSnapshot, Node

UNTITLED_PROJECT = "Untitled Project"
UNTITLED_NODE = "Untitled"


def node_title(node: Node) -> str:
    return one_line(node.title) or UNTITLED_NODE


def _body_lines(text: Optional[str]) -> List[str]:
    body = escape_block_markers(normalize_newlines(text)).strip()
    return body.splitlines() if body else []


def encode_markdown(snapshot: MindMapSnapshot) -> str:
    """
    Render the whole mind map as a nested outline:
      # Project
      <project description>
      ---
      - **Root**
        <description>
        - **Child**
          - **Grandchild**
    Two spaces of indent per depth level; pre-order, original child order.
    """
    project = snapshot.project
    lines: List[str] = [f"# {one_line(project.name) or UNTITLED_PROJECT}", ""]

    project_body = _body_lines(project.description)
    if project_body:
        lines.extend(project_body)
        lines.append("")
    lines.extend(["---", ""])

    for depth, node in snapshot.walk():
        indent = "  " * depth
        lines.append(f"{indent}- **{node_title(node)}**")
        for body_line in _body_lines(node.description):
            # blank lines stay blank; anything else nests under the item
            lines.append(f"{indent}  {body_line}" if body_line.strip() else "")

    return "\n".join(lines).rstrip("\n") + "\n"


class MarkdownExporter:
    media_type = "text/markdown"

    def export(self, snapshot: MindMapSnapshot, scope_node_id: str | None = None) -> str:
        return encode_markdown(snapshot)
