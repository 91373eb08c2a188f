from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import Optional, Sequence

from mind2doc.config_schema import load_config
from mind2doc.exceptions import Mind2DocError
from mind2doc.pipeline.core.config import RunConfig
from mind2doc.pipeline.export import FORMATS
from mind2doc.pipeline.runner import ExportRunner


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mind2doc",
        description="mind2doc: export a mind map as JSON, a Markdown outline or a plan-feature document.",
    )

    p.add_argument("--config", type=str, help="Path to config file (.toml/.json)")
    p.add_argument("--input", dest="input_override", type=str, help="Override [io].input (mind map JSON)")
    p.add_argument(
        "--format",
        dest="formats",
        action="append",
        help="Export format (json|markdown|plan-feature); repeat for several",
    )
    p.add_argument("--scope", dest="scope_node_id", type=str, help="Node id to scope plan-feature to")
    p.add_argument("--output-dir", type=str, help="Override [io].output_dir")
    p.add_argument("--stdout", action="store_true", help="Print artifacts instead of writing files")
    p.add_argument("--date", dest="export_date", type=_iso_date, help="Date used in file names (YYYY-MM-DD)")
    p.add_argument("--show-tree", action="store_true", help="Print the mind map tree before exporting")
    p.add_argument("--list-formats", action="store_true", help="List export formats and exit")
    p.add_argument("--debug", action="store_true", help="Enable verbose debug")

    return p


def main(argv: Optional[Sequence[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_formats:
        print("Available formats:")
        for fmt in FORMATS.values():
            print(f"  - {fmt.name:<13} {fmt.media_type:<17} {fmt.label}")
        sys.exit(0)

    try:
        app = load_config(args.config)
    except (Mind2DocError, FileNotFoundError) as e:
        raise SystemExit(f"❌ {e}")

    # Overrides
    if args.input_override:
        app.io.input = args.input_override
    if args.output_dir:
        app.io.output_dir = args.output_dir
    if args.stdout:
        app.io.stdout = True
    if args.formats:
        app.export.formats = [f.strip() for arg in args.formats for f in arg.split(",") if f.strip()]
    if args.scope_node_id is not None:
        app.export.scope_node_id = args.scope_node_id
    if args.export_date:
        app.export.export_date = args.export_date
    if args.show_tree:
        app.runtime.show_tree = True

    if not app.io.input:
        parser.error("no mind map given: pass --input or set [io].input in --config")

    try:
        cfg = RunConfig.from_app(app)
        runner = ExportRunner(cfg, debug=(args.debug or app.runtime.debug))
        runner.run()
    except (Mind2DocError, FileNotFoundError) as e:
        raise SystemExit(f"❌ {e}")


if __name__ == "__main__":
    main()
