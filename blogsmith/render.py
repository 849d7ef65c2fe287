from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import OutputError
from .routes import Route

DOCTYPE = "<!DOCTYPE html>"


@dataclass(frozen=True)
class Page:
    route: Route
    html: str


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise OutputError(f"Cannot write {path}: {exc}") from exc


def write_page(page: Page, output_dir: Path) -> Path:
    destination = page.route.destination(output_dir)
    write_text(destination, f"{DOCTYPE}\n{page.html}\n")
    return destination
