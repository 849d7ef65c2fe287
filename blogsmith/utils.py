from __future__ import annotations

import datetime as dt
import shutil
from pathlib import Path

from .errors import OutputError

DATE_FMT = "%Y-%m-%d"


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def format_date(value: dt.date) -> str:
    return value.strftime(DATE_FMT)


def clean_output_dir(output_dir: Path, project_root: Path) -> None:
    if not output_dir.exists():
        return
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved:
        raise OutputError("Refusing to clean project root.")
    if not output_resolved.is_relative_to(root_resolved):
        raise OutputError("Refusing to clean output directory outside project root.")
    try:
        shutil.rmtree(output_dir)
    except OSError as exc:
        raise OutputError(f"Cannot clean output directory {output_dir}: {exc}") from exc
