import re
from typing import Optional

from markdown_it import MarkdownIt
from rich.markup import escape
from rich.tree import Tree as RichTree

from mind2doc.pipeline.core.models import MindMapSnapshot, Node

_md = MarkdownIt("commonmark")
_ORDERED_MARKER_RE = re.compile(r"^(\s*)(\d{1,9})([.)])")
_FIRST_CHAR_RE = re.compile(r"^(\s*)\S")
_UNDERLINE_RE = re.compile(r"^ {0,3}(=+|-+)\s*$")
_WS_RE = re.compile(r"\s+")


def normalize_newlines(s: Optional[str]) -> str:
    """
    Normalize newlines and strip BOM if present.
    - Converts \r\n and \r to \n
    - Removes leading UTF-8 BOM (\\ufeff)
    """
    if s is None:
        return ""
    return s.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")


def one_line(s: Optional[str]) -> str:
    """Collapse any whitespace (newlines included) into single spaces."""
    return _WS_RE.sub(" ", s or "").strip()


def _escape_line(line: str) -> str:
    m = _ORDERED_MARKER_RE.match(line)
    if m:
        return f"{m.group(1)}{m.group(2)}\\{line[m.end(2):]}"
    m = _FIRST_CHAR_RE.match(line)
    if m:
        return f"{m.group(1)}\\{line[m.end(1):]}"
    return line


def escape_block_markers(text: str) -> str:
    """
    Backslash-escape every line that would open a heading, list item,
    block quote or thematic break, so free text can be nested inside an
    outline without adding structure of its own. Fenced code is untouched.
    """
    text = normalize_newlines(text)
    lines = text.split("\n")
    targets: set[int] = set()
    code_lines: set[int] = set()
    for tok in _md.parse(text):
        if tok.map is None:
            continue
        if tok.type == "heading_open":
            # setext headings: the underline is what makes it a heading
            targets.add(tok.map[0] if tok.markup.startswith("#") else tok.map[1] - 1)
        elif tok.type in ("list_item_open", "blockquote_open", "hr"):
            targets.add(tok.map[0])
        elif tok.type in ("fence", "code_block"):
            code_lines.update(range(tok.map[0], tok.map[1]))
    # underline-only lines turn a preceding paragraph into a heading once nested
    targets.update(
        i for i, line in enumerate(lines) if i not in code_lines and _UNDERLINE_RE.match(line)
    )
    for i in sorted(targets):
        lines[i] = _escape_line(lines[i])
    return "\n".join(lines)


def _tree_label(node: Node) -> str:
    label = f"[bold]{escape(node.title)}[/] ([dim]{escape(node.id)}[/])"
    if node.status:
        label += f" [italic]{escape(node.status)}[/]"
    return label


def render_tree(node: Node, rich_tree: Optional[RichTree] = None) -> RichTree:
    top = rich_tree.add(_tree_label(node)) if rich_tree is not None else RichTree(_tree_label(node))
    stack = [(top, node)]
    while stack:
        branch, current = stack.pop()
        for child in current.children:
            stack.append((branch.add(_tree_label(child)), child))
    return top


def render_snapshot(snapshot: MindMapSnapshot) -> RichTree:
    tree = RichTree(f"[bold]{escape(snapshot.project.name)}[/]")
    for root in snapshot.roots:
        render_tree(root, tree)
    return tree
