"""Shared fixtures for mind2doc tests."""

from __future__ import annotations

import random
from datetime import date

import pytest

from mind2doc.pipeline.core.models import MindMapSnapshot, Node, Project


@pytest.fixture
def export_day() -> date:
    return date(2024, 1, 8)


@pytest.fixture
def snapshot() -> MindMapSnapshot:
    """Alpha -> (Beta -> Delta), Gamma."""
    delta = Node(id="d", title="Delta component", description="delta-desc", kind="component")
    beta = Node(
        id="b",
        title="Beta feature",
        description="beta-desc",
        kind="feature",
        status="doing",
        children=[delta],
    )
    gamma = Node(id="c", title="Gamma feature", description="gamma-desc", kind="feature")
    alpha = Node(id="a", title="Alpha root", description="alpha-desc", kind="root", children=[beta, gamma])
    return MindMapSnapshot(
        project=Project(name="My Project", description="Plan for Q1", created_at="2024-01-01T00:00:00Z"),
        roots=[alpha],
    )


@pytest.fixture
def empty_snapshot() -> MindMapSnapshot:
    return MindMapSnapshot(project=Project(name="Empty Map"))


@pytest.fixture
def flat_document() -> dict:
    """Layout saved by the mind map editor: flat nodes linked by parent_id."""
    return {
        "version": "1.0",
        "project": {"name": "Editor Map", "description": "From the editor", "created_at": "2024-01-01T00:00:00Z"},
        "nodes": [
            {
                "id": "root",
                "type": "root",
                "label": "Root",
                "description": "",
                "parent_id": None,
                "metadata": {"status": "planned", "archon_task_ids": [], "expanded": True},
                "position": {"x": 0, "y": 0},
            },
            {
                "id": "f2",
                "type": "feature",
                "label": "Second",
                "description": "second-desc",
                "parent_id": "root",
                "metadata": {"status": "done"},
                "position": {"x": 10, "y": 0},
            },
            {
                "id": "f1",
                "type": "feature",
                "label": "First",
                "description": "first-desc",
                "parent_id": "root",
                "metadata": {"status": "doing"},
                "position": {"x": 20, "y": 0},
            },
            {
                "id": "c1",
                "type": "component",
                "label": "Part",
                "description": "part-desc",
                "parent_id": "f1",
                "metadata": {"status": "planned"},
                "position": {"x": 30, "y": 0},
            },
        ],
        "edges": [
            {"id": "e1", "source": "root", "target": "f2", "type": "parent-child"},
            {"id": "e2", "source": "root", "target": "f1", "type": "parent-child"},
            {"id": "e3", "source": "f1", "target": "c1", "type": "parent-child"},
        ],
    }


DEEP_LEVELS = 600


def _build(parents, describe=lambda i: None) -> tuple:
    """Nodes from a parent-index list (parent index < own index), leaves first."""
    children = [[] for _ in parents]
    roots = []
    for i, parent in enumerate(parents):
        (roots if parent is None else children[parent]).append(i)
    built = [None] * len(parents)
    for i in reversed(range(len(parents))):
        built[i] = Node(
            id=f"n{i}",
            title=f"Node {i}",
            description=describe(i),
            children=[built[c] for c in children[i]],
        )
    return tuple(built[i] for i in roots)


def _mixed_parents(count: int, seed: int) -> list:
    rng = random.Random(seed)
    parents = [None]
    for i in range(1, count):
        roll = rng.random()
        if roll < 0.05:
            parents.append(None)
        elif roll < 0.6:
            parents.append(i - 1)  # keeps long chains in the mix
        else:
            parents.append(rng.randrange(i))
    return parents


def _describe(i: int):
    if i % 7 == 0:
        return f"about {i}\n# not a heading\n- not an item"
    return f"desc {i}" if i % 3 == 0 else None


@pytest.fixture(params=["deep", "wide", "mixed"])
def generated_snapshot(request) -> MindMapSnapshot:
    if request.param == "deep":
        parents = [None] + list(range(DEEP_LEVELS - 1))
    elif request.param == "wide":
        parents = [None] + [0] * 400 + [1 + i // 3 for i in range(600)]
    else:
        parents = _mixed_parents(1500, seed=7)
    return MindMapSnapshot(
        project=Project(name=f"Generated {request.param}", description="generated"),
        roots=_build(parents, _describe),
    )


@pytest.fixture
def deep_snapshot() -> MindMapSnapshot:
    return MindMapSnapshot(
        project=Project(name="Deep"),
        roots=_build([None] + list(range(DEEP_LEVELS - 1))),
    )
