from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import sys

from pydantic import ValidationError

from mind2doc.exceptions import MalformedSnapshotError, SnapshotError
from mind2doc.utils import json_io
from .models import MindMapSnapshot


def _warn(msg: str) -> None:
    print(f"⚠️ {msg}", file=sys.stderr)


class SnapshotAccessor:
    """Zero-argument source of the current mind map snapshot."""

    def __call__(self) -> MindMapSnapshot: ...


class StaticSnapshotAccessor(SnapshotAccessor):
    def __init__(self, snapshot: MindMapSnapshot):
        self.snapshot = snapshot

    def __call__(self) -> MindMapSnapshot:
        return self.snapshot


class FileSnapshotAccessor(SnapshotAccessor):
    """
    Loads a snapshot from a JSON file on every call.

    Accepts the nested layout written by the JSON exporter and the flat
    layout (``nodes`` with ``parent_id``) kept by the mind map editor.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __call__(self) -> MindMapSnapshot:
        if not self.path.exists():
            raise FileNotFoundError(f"Mind map file not found: {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8-sig")  # handles BOM transparently
        except UnicodeDecodeError as e:
            raise SnapshotError(
                f"Could not read {self.path} as UTF-8. Please re-save the file as UTF-8."
            ) from e
        try:
            raw = json_io.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"{self.path} is not valid JSON: {e}") from e
        return snapshot_from_dict(raw, source=str(self.path))


def snapshot_from_dict(raw: Any, source: str = "<memory>") -> MindMapSnapshot:
    """Validate a decoded JSON document into a well-formed snapshot."""
    if not isinstance(raw, dict):
        raise SnapshotError(f"{source}: expected a JSON object at top level")
    if "roots" not in raw and "nodes" in raw:
        _warn(f"{source}: flat node list detected; converting to nested roots.")
        raw = _apply_flat_mapping(raw)
    try:
        snapshot = MindMapSnapshot.from_data(raw)
    except ValidationError as e:
        raise MalformedSnapshotError(f"{source}: invalid mind map\n{e}") from e
    snapshot.check_tree()
    return snapshot


def _flat_node(item: Dict[str, Any]) -> Dict[str, Any]:
    metadata = item.get("metadata") or {}
    return {
        "id": item.get("id"),
        "title": item.get("title") or item.get("label") or "",
        "description": item.get("description") or None,
        "kind": item.get("kind") or item.get("type"),
        "status": item.get("status") or metadata.get("status"),
        "children": [],
    }


def _apply_flat_mapping(raw: dict) -> dict:
    """
    Flat layout -> nested layout.

    - ``nodes[].parent_id`` becomes containment; list order is child order.
    - ``label``/``type``/``metadata.status`` map to ``title``/``kind``/``status``.
    - ``edges`` are dropped (parent-child edges duplicate ``parent_id``).
    """
    items: List[Dict[str, Any]] = raw.get("nodes") or []
    by_id: Dict[str, Dict[str, Any]] = {}
    parents: Dict[str, Optional[str]] = {}
    for item in items:
        node_id = item.get("id")
        if node_id in by_id:
            raise MalformedSnapshotError(f"Duplicate node id: '{node_id}'")
        by_id[node_id] = _flat_node(item)
        parents[node_id] = item.get("parent_id")

    roots: List[Dict[str, Any]] = []
    for node_id, parent_id in parents.items():
        if parent_id is None:
            roots.append(by_id[node_id])
        elif parent_id not in by_id:
            raise MalformedSnapshotError(
                f"Node '{node_id}' points to missing parent '{parent_id}'"
            )
        else:
            by_id[parent_id]["children"].append(by_id[node_id])

    reachable = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        reachable += 1
        stack.extend(node["children"])
    if reachable != len(by_id):
        raise MalformedSnapshotError(
            f"{len(by_id) - reachable} node(s) are not reachable from a root (parent cycle)"
        )

    project = dict(raw.get("project") or {})
    return {
        "version": str(raw.get("version") or "1.0"),
        "project": project,
        "roots": roots,
    }
