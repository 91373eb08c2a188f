from __future__ import annotations
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional
from rich.console import Console

from mind2doc.utils.tree_helper import render_snapshot

from .core.config import RunConfig
from .core.models import MindMapSnapshot
from .core.artifacts import Artifact, ConsoleSink, DeliverySink, DirectorySink
from .core.snapshot import FileSnapshotAccessor, SnapshotAccessor
from .core.progress import ProgressReporter, RichProgressReporter
from .export import ExportFormat, build_artifact, get_format


class ExportRunner:
    """
    accessor -> encoder -> file name -> sink, once per requested format.

    The snapshot is fetched once per run, so every artifact of a run
    describes the same state of the mind map.
    """

    def __init__(
        self,
        config: RunConfig,
        *,
        accessor: Optional[SnapshotAccessor] = None,
        sink: Optional[DeliverySink] = None,
        debug: bool = False,
        console: Optional[Console] = None,
        progress: Optional[ProgressReporter] = None,
        today: Callable[[], date] = date.today,
    ):
        self.cfg = config
        self.debug = debug
        self.console = console or Console(stderr=True)
        self.today = today

        # Fail on bad format names before touching any input
        self.formats: List[ExportFormat] = [get_format(f) for f in config.formats]

        if accessor is None:
            if config.input_path is None:
                raise ValueError("ExportRunner needs an accessor or RunConfig.input_path")
            accessor = FileSnapshotAccessor(config.input_path)
        self.accessor = accessor

        if sink is None:
            sink = ConsoleSink() if config.to_stdout else DirectorySink(config.output_root)
        self.sink = sink
        self.progress = progress or RichProgressReporter(self.console)

    def export_date(self) -> date:
        return self.cfg.export_date or self.today()

    def _check_scope(self, snapshot: MindMapSnapshot) -> None:
        scope_id = self.cfg.scope_node_id
        if not scope_id or not any(f.name == "plan-feature" for f in self.formats):
            return
        node = snapshot.find(scope_id)
        if node is None:
            self.console.log(f"⚠️ Scope node '{scope_id}' not found; exporting the whole mind map")
        elif self.debug:
            self.console.log(f"Scope: '{node.title}' ({scope_id})")

    def export(self, snapshot: MindMapSnapshot, fmt: ExportFormat, day: date) -> Artifact:
        artifact = build_artifact(snapshot, fmt, day, scope_node_id=self.cfg.scope_node_id)
        delivered = self.sink.deliver(artifact.text, artifact.file_name, artifact.media_type)
        where = delivered if isinstance(delivered, Path) else artifact.file_name
        self.console.log(f"✅ {fmt.label} saved to: {where} ({artifact.media_type})")
        return artifact

    def run(self) -> List[Artifact]:
        snapshot = self.accessor()
        self.console.log(
            f"Loaded mind map '{snapshot.project.name}' ({snapshot.node_count} nodes)"
        )
        if self.debug or self.cfg.show_tree:
            self.console.print(render_snapshot(snapshot))
        self._check_scope(snapshot)

        day = self.export_date()
        artifacts: List[Artifact] = []
        with self.progress as progress:
            task = progress.start("Exporting", total=len(self.formats))
            for fmt in self.formats:
                artifacts.append(self.export(snapshot, fmt, day))
                progress.advance(task)
            progress.finish(task)
        return artifacts
