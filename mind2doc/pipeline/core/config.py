from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
import os
from typing import List, Optional

from mind2doc.config_schema import AppConfig
from mind2doc.exceptions import ConfigError


@dataclass
class RunConfig:
    """
    Runtime config (resolved from AppConfig + CLI overrides).

    MIND2DOC_EXPORT_DATE (YYYY-MM-DD) pins the file-name date when none is
    configured, so scheduled exports produce stable names.
    """
    input_path: Optional[Path] = None
    output_root: Path = Path("output")
    formats: List[str] = field(default_factory=lambda: ["json"])
    scope_node_id: Optional[str] = None
    export_date: Optional[date] = None
    to_stdout: bool = False
    show_tree: bool = False
    app: Optional[AppConfig] = None

    def __post_init__(self):
        env_date = os.getenv("MIND2DOC_EXPORT_DATE", "").strip()
        if self.export_date is None and env_date:
            try:
                self.export_date = date.fromisoformat(env_date)
            except ValueError as e:
                raise ConfigError(f"MIND2DOC_EXPORT_DATE must be YYYY-MM-DD, got '{env_date}'") from e
        if not self.scope_node_id:
            self.scope_node_id = None

    @classmethod
    def from_app(cls, app: AppConfig):
        return cls(
            input_path=Path(app.io.input) if app.io.input else None,
            output_root=Path(app.io.output_dir),
            formats=list(app.export.formats),
            scope_node_id=app.export.scope_node_id,
            export_date=app.export.export_date,
            to_stdout=app.io.stdout,
            show_tree=app.runtime.show_tree,
            app=app,
        )
