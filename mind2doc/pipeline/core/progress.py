from __future__ import annotations
from typing import Any, Optional
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, MofNCompleteColumn

class ProgressReporter:
    def start(self, description: str, total: Optional[int] = None) -> Any: ...
    def advance(self, task: Any, step: int = 1): ...
    def finish(self, task: Any): ...
    def __enter__(self): return self
    def __exit__(self, exc_type, exc, tb): return None

class RichProgressReporter(ProgressReporter):
    """Bar per export batch; renders on stderr so stdout stays clean for ConsoleSink."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            transient=True,
            console=self.console,
        )

    def __enter__(self):
        self.progress.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.progress.__exit__(exc_type, exc, tb)

    def start(self, description: str, total: Optional[int] = None):
        return self.progress.add_task(description, total=total)

    def advance(self, task: Any, step: int = 1):
        self.progress.advance(task, step)

    def finish(self, task: Any):
        self.progress.update(task, completed=self.progress.tasks[task].total)

class NoopProgressReporter(ProgressReporter):
    def start(self, description: str, total: Optional[int] = None) -> int: return 0
    def advance(self, task: Any, step: int = 1): pass
    def finish(self, task: Any): pass
