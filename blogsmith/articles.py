from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .content import Document
from .errors import ContentError
from .ingest import Source

ARTICLE_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


@dataclass(frozen=True)
class Article:
    document: Document
    path: Path
    date: dt.date

    @property
    def slug(self) -> str:
        return self.path.stem

    @property
    def title(self) -> str:
        return require_title(self.document, self.path)


def require_title(document: Document, path: Path) -> str:
    if not document.title:
        raise ContentError([f"{path}: missing title"])
    return document.title


def check_titles(sources: Iterable[Source | Article]) -> None:
    problems = [f"{source.path}: missing title" for source in sources if not source.document.title]
    if problems:
        raise ContentError(problems)


def parse_article_date(value: Optional[str]) -> Optional[dt.date]:
    if not value:
        return None
    value = value.strip()
    if not ARTICLE_DATE_RE.match(value):
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        return None


def select_articles(sources: Iterable[Source]) -> list[Article]:
    """Keep published, dated documents in ascending date order.

    Drafts and documents without a valid ``YYYY-MM-DD`` date are left out.
    Documents sharing a date keep their discovery order.
    """
    articles = []
    for source in sources:
        if source.document.draft:
            continue
        date = parse_article_date(source.document.date)
        if date is None:
            continue
        articles.append(Article(source.document, source.path, date))
    articles.sort(key=lambda article: article.date)
    return articles


def latest_first(articles: list[Article]) -> list[Article]:
    return list(reversed(articles))
