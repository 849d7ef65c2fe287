from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from .articles import Article
from .errors import ContentError

INDEX_FILE = "index.html"


class PageKind(Enum):
    HOME = "home"
    ARTICLE_INDEX = "article-index"
    ARTICLE = "article"
    PAGE = "page"


@dataclass(frozen=True)
class Route:
    """Location of a page below the output root, always served as ``<dir>/index.html``."""

    segments: tuple[str, ...] = ()

    @property
    def url(self) -> str:
        if not self.segments:
            return "/"
        return "/" + "/".join(self.segments) + "/"

    def destination(self, output_dir: Path) -> Path:
        return output_dir.joinpath(*self.segments, INDEX_FILE)


def slug_for(path: Path) -> str:
    return path.stem


def article_route(article: Article) -> Route:
    # ISO year, not calendar year: 2024-12-30 belongs to week 1 of 2025.
    year, week, _ = article.date.isocalendar()
    return Route((f"{year:04d}", f"{week:02d}", article.slug))


def route_for(kind: PageKind, item: Optional[Union[Article, Path]] = None) -> Route:
    if kind is PageKind.HOME:
        return Route()
    if kind is PageKind.ARTICLE_INDEX:
        return Route(("articles",))
    if kind is PageKind.ARTICLE:
        if not isinstance(item, Article):
            raise TypeError("Article routes need the article.")
        return article_route(item)
    if kind is PageKind.PAGE:
        if not isinstance(item, Path):
            raise TypeError("Standalone page routes need the source path.")
        return Route((slug_for(item),))
    raise ValueError(f"Unknown page kind: {kind}")


def check_unique(routes: Iterable[tuple[Route, str]]) -> None:
    """Fail when two pages would be written to the same file.

    ``routes`` pairs each route with a label naming its origin.
    """
    owners: dict[Route, str] = {}
    problems = []
    for route, label in routes:
        previous = owners.get(route)
        if previous is not None:
            problems.append(f"{label}: route {route.url} already used by {previous}")
            continue
        owners[route] = label
    if problems:
        raise ContentError(problems)
