from __future__ import annotations

from datetime import date, datetime

from slugify import slugify

from .formats import ExportFormat, get_format


def project_slug(project_name: str) -> str:
    return slugify(project_name or "", lowercase=True) or "untitled"


def derive_file_name(project_name: str, fmt: str | ExportFormat, day: date) -> str:
    """
    <slug>[-<segment>]-<YYYY-MM-DD><ext>

    derive_file_name("My Project", "plan-feature", date(2024, 1, 8))
    -> "my-project-plan-2024-01-08.md"
    """
    export_format = get_format(fmt)
    if isinstance(day, datetime):
        day = day.date()
    parts = [project_slug(project_name)]
    if export_format.name_segment:
        parts.append(export_format.name_segment)
    parts.append(day.isoformat())
    return "-".join(parts) + export_format.extension
