from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import markdown

from .utils import parse_bool

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_CONFIG = {"codehilite": {"guess_lang": False}}
SINGLE_PARAGRAPH_RE = re.compile(r"^<p>(?P<inner>.*)</p>$", re.DOTALL)


@dataclass(frozen=True)
class Document:
    """A source file after front matter parsing and Markdown conversion.

    ``body`` and ``summary`` are HTML. ``date`` is the raw front matter
    value; it is only validated when the document is considered for the
    article list.
    """

    title: Optional[str]
    date: Optional[str]
    draft: bool
    body: str
    summary: Optional[str] = None


def unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_front_matter(text: str) -> tuple[dict, str]:
    clean_text = text.lstrip("\ufeff")
    lines = clean_text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, clean_text

    end = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end = i
            break
    if end is None:
        return {}, clean_text

    meta = {}
    for line in lines[1:end]:
        line = line.strip()
        if not line or line.startswith("#") or ":" not in line:
            continue
        key, value = line.split(":", 1)
        meta[key.strip().lower()] = unquote(value.strip())
    body = "\n".join(lines[end + 1 :])
    return meta, body


def extract_title(meta: dict, body: str) -> tuple[Optional[str], str]:
    if meta.get("title"):
        return meta["title"], body
    lines = body.splitlines()
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            title = stripped[2:].strip() or None
            new_body = "\n".join(lines[i + 1 :]).lstrip()
            return title, new_body
        if stripped:
            break
    return None, body


def render_markdown(text: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, extension_configs=MARKDOWN_CONFIG)
    return md.convert(text)


def process_fragment(text: str) -> str:
    """Render a short Markdown snippet from the config (tagline, footer).

    A snippet that renders to a single paragraph is unwrapped so callers can
    place it inside their own element.
    """
    html_text = render_markdown(text).strip()
    match = SINGLE_PARAGRAPH_RE.match(html_text)
    if match and "<p>" not in match.group("inner"):
        return match.group("inner")
    return html_text


def process_text(text: str) -> Document:
    meta, body = parse_front_matter(text)
    title, body = extract_title(meta, body)
    date_value = (meta.get("date") or "").strip() or None
    summary_text = (meta.get("summary") or "").strip()
    return Document(
        title=title,
        date=date_value,
        draft=parse_bool(meta.get("draft")),
        body=render_markdown(body),
        summary=render_markdown(summary_text) if summary_text else None,
    )


def process_document(path: Path) -> Document:
    return process_text(path.read_text(encoding="utf-8"))
