from __future__ import annotations

from mind2doc.utils import json_io
from ..core.models import MindMapSnapshot


def encode_json(snapshot: MindMapSnapshot) -> str:
    """Lossless snapshot dump: every field, declaration order, nulls kept."""
    return json_io.dumps(snapshot.to_data(), indent=2)


def decode_json(text: str) -> MindMapSnapshot:
    return MindMapSnapshot.from_data(json_io.loads(text))


class JSONExporter:
    media_type = "application/json"

    def export(self, snapshot: MindMapSnapshot, scope_node_id: str | None = None) -> str:
        return encode_json(snapshot)
