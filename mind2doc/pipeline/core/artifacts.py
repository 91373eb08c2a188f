from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from rich.console import Console


@dataclass(frozen=True)
class Artifact:
    text: str
    file_name: str
    media_type: str


class DeliverySink:
    """
    Receives (text, file_name, media_type) for each exported artifact.

    Sinks own delivery entirely; their errors propagate to the caller.
    """

    def deliver(self, text: str, file_name: str, media_type: str) -> Any: ...


class DirectorySink(DeliverySink):
    """
    Writes artifacts as files under one output directory.

    Example:
      deliver("...", "my-project-2024-01-08.md", "text/markdown")
      -> <output_root>/my-project-2024-01-08.md
    """

    def __init__(self, output_root: Path | str):
        self.output_root = Path(output_root).resolve()

    def resolve_path(self, file_name: str) -> Path:
        return (self.output_root / file_name).resolve()

    def deliver(self, text: str, file_name: str, media_type: str) -> Path:
        p = self.resolve_path(file_name)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p


class ConsoleSink(DeliverySink):
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(soft_wrap=True)

    def deliver(self, text: str, file_name: str, media_type: str) -> None:
        self.console.out(text, highlight=False)


class MemorySink(DeliverySink):
    def __init__(self):
        self.artifacts: List[Artifact] = []

    def deliver(self, text: str, file_name: str, media_type: str) -> Artifact:
        artifact = Artifact(text=text, file_name=file_name, media_type=media_type)
        self.artifacts.append(artifact)
        return artifact
