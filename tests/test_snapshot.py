"""Tests for snapshot accessors, including the flat editor layout."""

import json

import pytest

from mind2doc.exceptions import MalformedSnapshotError, SnapshotError
from mind2doc.pipeline.core.snapshot import (
    FileSnapshotAccessor,
    StaticSnapshotAccessor,
    snapshot_from_dict,
)
from mind2doc.pipeline.export import encode_json


def test_static_accessor_returns_snapshot(snapshot):
    assert StaticSnapshotAccessor(snapshot)() is snapshot


def test_file_accessor_reads_exported_json(tmp_path, snapshot):
    path = tmp_path / "map.json"
    path.write_text(encode_json(snapshot), encoding="utf-8")
    assert FileSnapshotAccessor(path)() == snapshot


def test_file_accessor_handles_bom(tmp_path, snapshot):
    path = tmp_path / "map.json"
    path.write_text("\ufeff" + encode_json(snapshot), encoding="utf-8")
    assert FileSnapshotAccessor(path)().project.name == "My Project"


def test_file_accessor_reads_fresh_state_each_call(tmp_path, snapshot, empty_snapshot):
    path = tmp_path / "map.json"
    path.write_text(encode_json(snapshot), encoding="utf-8")
    accessor = FileSnapshotAccessor(path)
    first = accessor()
    path.write_text(encode_json(empty_snapshot), encoding="utf-8")
    assert accessor() == empty_snapshot
    assert first == snapshot


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSnapshotAccessor(tmp_path / "nope.json")()


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SnapshotError, match="not valid JSON"):
        FileSnapshotAccessor(path)()


def test_top_level_must_be_object():
    with pytest.raises(SnapshotError):
        snapshot_from_dict([1, 2, 3])


def test_missing_required_fields():
    with pytest.raises(MalformedSnapshotError):
        snapshot_from_dict({"project": {"name": "P"}, "roots": [{"id": "x"}]})


def test_duplicate_ids_rejected():
    doc = {
        "project": {"name": "P"},
        "roots": [{"id": "x", "title": "One"}, {"id": "x", "title": "Two"}],
    }
    with pytest.raises(MalformedSnapshotError, match="Duplicate node id"):
        snapshot_from_dict(doc)


def test_flat_layout_is_nested(flat_document, capsys):
    snap = snapshot_from_dict(flat_document)
    assert "flat node list" in capsys.readouterr().err

    assert snap.project.name == "Editor Map"
    assert [r.id for r in snap.roots] == ["root"]
    root = snap.roots[0]
    assert root.title == "Root"
    assert root.description is None
    assert root.kind == "root"
    assert root.status == "planned"
    # list order is child order
    assert [c.id for c in root.children] == ["f2", "f1"]
    assert [c.title for c in root.children[1].children] == ["Part"]


def test_flat_file_round_trips_through_nested_json(tmp_path, flat_document):
    path = tmp_path / "editor.json"
    path.write_text(json.dumps(flat_document), encoding="utf-8")
    snap = FileSnapshotAccessor(path)()
    assert snapshot_from_dict(json.loads(encode_json(snap))) == snap


def test_flat_layout_missing_parent(flat_document):
    flat_document["nodes"][3]["parent_id"] = "ghost"
    with pytest.raises(MalformedSnapshotError, match="missing parent 'ghost'"):
        snapshot_from_dict(flat_document)


def test_flat_layout_cycle(flat_document):
    flat_document["nodes"].append({"id": "x", "label": "X", "parent_id": "y"})
    flat_document["nodes"].append({"id": "y", "label": "Y", "parent_id": "x"})
    with pytest.raises(MalformedSnapshotError, match="not reachable"):
        snapshot_from_dict(flat_document)


def test_flat_layout_duplicate_ids(flat_document):
    flat_document["nodes"].append(dict(flat_document["nodes"][1]))
    with pytest.raises(MalformedSnapshotError, match="Duplicate node id"):
        snapshot_from_dict(flat_document)


def test_deep_flat_layout_from_file(tmp_path):
    levels = 600
    nodes = [
        {"id": f"n{i}", "label": f"Level {i}", "parent_id": f"n{i - 1}" if i else None}
        for i in range(levels)
    ]
    path = tmp_path / "deep.json"
    # children listed before their parents
    path.write_text(json.dumps({"project": {"name": "Deep"}, "nodes": nodes[::-1]}), encoding="utf-8")

    snap = FileSnapshotAccessor(path)()
    assert [(depth, node.id) for depth, node in snap.walk()] == [(i, f"n{i}") for i in range(levels)]


def test_deep_nested_file_matches_export(tmp_path, deep_snapshot):
    path = tmp_path / "deep.json"
    text = encode_json(deep_snapshot)
    path.write_text(text, encoding="utf-8")
    assert encode_json(FileSnapshotAccessor(path)()) == text


def test_bad_field_in_nested_node_is_reported():
    leaf = {"id": "leaf", "title": None}
    doc = {"project": {"name": "P"}, "roots": [{"id": "top", "title": "Top", "children": [leaf]}]}
    with pytest.raises(MalformedSnapshotError, match="invalid mind map"):
        snapshot_from_dict(doc)


def test_non_list_children_rejected():
    doc = {"project": {"name": "P"}, "roots": [{"id": "x", "title": "X", "children": "nope"}]}
    with pytest.raises(MalformedSnapshotError):
        snapshot_from_dict(doc)
