from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import List, Optional
import json
import sys

import toml
from pydantic import BaseModel, Field, ValidationError

from mind2doc.exceptions import ConfigError


# =============================================================================
# CONFIG MODELS
# =============================================================================

class IOConfig(BaseModel):
    # Mind map snapshot (JSON; nested or flat layout)
    input: Optional[str] = None

    # Artifacts are written as <output_dir>/<derived file name>
    output_dir: str = "output"

    # Print artifacts to stdout instead of writing files
    stdout: bool = False


class ExportConfig(BaseModel):
    formats: List[str] = Field(default_factory=lambda: ["json"])

    # Only used by plan-feature; unknown ids fall back to the whole map
    scope_node_id: Optional[str] = None

    # Date stamped into file names; today when omitted
    export_date: Optional[date] = None


class RuntimeConfig(BaseModel):
    debug: bool = False
    show_tree: bool = False


class AppConfig(BaseModel):
    io: IOConfig = Field(default_factory=IOConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


# =============================================================================
# LOAD & NORMALIZE
# =============================================================================

def _load_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")  # handles BOM transparently
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Could not read {path} as UTF-8. Please re-save the file as UTF-8 (with or without BOM)."
        ) from e


def _warn(msg: str) -> None:
    print(f"⚠️ {msg}", file=sys.stderr)


def _apply_legacy_mappings(raw: dict) -> dict:
    """
    Backwards compatibility layer:
    - [export].format = "json" (single string) -> [export].formats = ["json"]
    """
    if not isinstance(raw, dict):
        return {}

    export = raw.get("export", {}) or {}
    if "format" in export:
        _warn("Key [export].format is deprecated; use [export].formats (a list).")
        legacy = export.pop("format")
        if "formats" not in export and legacy:
            export["formats"] = [legacy] if isinstance(legacy, str) else list(legacy)
    if export:
        raw["export"] = export

    return raw


def _parse_config_text(text: str, suffix: str) -> dict:
    try:
        if suffix == ".toml":
            return toml.loads(text)
        # Default to JSON if unknown
        return json.loads(text)
    except (toml.TomlDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not parse config ({suffix or 'json'}): {e}") from e


def load_config(path_like: Optional[str]) -> AppConfig:
    raw: dict = {}
    if path_like:
        p = Path(path_like)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {path_like}")
        raw = _parse_config_text(_load_text(p), p.suffix.lower())

    raw = _apply_legacy_mappings(raw)
    try:
        return AppConfig(**(raw or {}))
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path_like}:\n{e}") from e
