from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from mind2doc.exceptions import MalformedSnapshotError


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    created_at: Optional[str] = None  # ISO-8601
    updated_at: Optional[str] = None  # ISO-8601


class Node(BaseModel):
    """
    One idea/task in the mind map.

    Children are an ordered tuple; the order is kept by every exporter.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: Optional[str] = None
    kind: Optional[str] = None     # root | feature | component | detail
    status: Optional[str] = None   # planned | doing | review | done
    children: Tuple[Node, ...] = ()

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, Node]]:
        """Yield (depth, node) for this node and its descendants, pre-order."""
        return iter_nodes((self,), depth)


Node.model_rebuild()


def iter_nodes(nodes: Iterable[Node], depth: int = 0) -> Iterator[Tuple[int, Node]]:
    # explicit stack so deep maps don't hit the recursion limit
    stack = [(depth, n) for n in reversed(tuple(nodes))]
    while stack:
        level, node = stack.pop()
        yield level, node
        stack.extend((level + 1, c) for c in reversed(node.children))


class MindMapSnapshot(BaseModel):
    """
    Immutable point-in-time copy of a mind map.

    Every exporter takes one of these and nothing else. Well-formedness is the
    accessor's job (see ``check_tree``); exporters assume a proper tree.
    """
    model_config = ConfigDict(frozen=True)

    version: str = "1.0"
    project: Project
    roots: Tuple[Node, ...] = ()

    def walk(self) -> Iterator[Tuple[int, Node]]:
        return iter_nodes(self.roots)

    def find(self, node_id: Optional[str]) -> Optional[Node]:
        if not node_id:
            return None
        for _, node in self.walk():
            if node.id == node_id:
                return node
        return None

    @property
    def node_count(self) -> int:
        return sum(1 for _ in self.walk())

    def check_tree(self) -> None:
        """Raise MalformedSnapshotError unless nodes form a tree with unique ids."""
        seen_ids: set[str] = set()
        seen_objects: set[int] = set()
        stack = list(self.roots)
        while stack:
            node = stack.pop()
            if id(node) in seen_objects:
                raise MalformedSnapshotError(
                    f"Node '{node.id}' is reachable twice (shared child or cycle)"
                )
            seen_objects.add(id(node))
            if node.id in seen_ids:
                raise MalformedSnapshotError(f"Duplicate node id: '{node.id}'")
            seen_ids.add(node.id)
            stack.extend(node.children)

    def to_data(self) -> Dict[str, Any]:
        """``model_dump(mode="json")`` equivalent that builds nested children with a stack."""
        data = self.model_dump(mode="json", exclude={"roots"})
        data["roots"] = roots = []
        stack = [(n, roots) for n in reversed(self.roots)]
        while stack:
            node, siblings = stack.pop()
            item = node.model_dump(mode="json", exclude={"children"})
            item["children"] = []
            siblings.append(item)
            stack.extend((c, item["children"]) for c in reversed(node.children))
        return data

    @classmethod
    def from_data(cls, raw: Any) -> MindMapSnapshot:
        """
        Validate decoded JSON into a snapshot, nodes first (leaves up).

        Each ``Node`` is validated with its children already built, so
        pydantic only ever checks one level; depth is unbounded.
        Raises pydantic ``ValidationError`` on bad fields.
        """
        roots = raw.get("roots", ()) if isinstance(raw, dict) else None
        if isinstance(roots, (list, tuple)):
            raw = {**raw, "roots": nodes_from_data(roots)}
        return cls.model_validate(raw)


def nodes_from_data(items: Sequence[Any]) -> Tuple[Node, ...]:
    # pre-order pass records each raw node and the slots of its children
    flat: List[Any] = []
    child_slots: List[List[int]] = []
    top: List[int] = []
    stack = [(item, None) for item in reversed(items)]
    while stack:
        item, parent = stack.pop()
        slot = len(flat)
        flat.append(item)
        child_slots.append([])
        (top if parent is None else child_slots[parent]).append(slot)
        children = item.get("children", ()) if isinstance(item, dict) else ()
        if isinstance(children, (list, tuple)):
            stack.extend((c, slot) for c in reversed(children))

    # reverse pre-order visits every child before its parent
    built: List[Optional[Node]] = [None] * len(flat)
    for slot in reversed(range(len(flat))):
        item = flat[slot]
        if isinstance(item, dict) and isinstance(item.get("children", ()), (list, tuple)):
            item = {**item, "children": [built[c] for c in child_slots[slot]]}
        built[slot] = Node.model_validate(item)
    return tuple(built[slot] for slot in top)
