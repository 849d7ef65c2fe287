"""Unit tests for routes.py"""

import datetime as dt
from pathlib import Path

import pytest

from blogsmith.errors import ContentError
from blogsmith.routes import PageKind, Route, article_route, check_unique, route_for, slug_for


def _iso_week_by_definition(day: dt.date) -> tuple[int, int]:
    """ISO-8601: week 1 is the week (Monday start) containing January 4th."""
    def week_one_monday(year):
        jan4 = dt.date(year, 1, 4)
        return jan4 - dt.timedelta(days=jan4.weekday())

    year = day.year
    if day >= week_one_monday(year + 1):
        year += 1
    elif day < week_one_monday(year):
        year -= 1
    return year, (day - week_one_monday(year)).days // 7 + 1


def test_home_route():
    """The home page is index.html at the output root."""
    route = route_for(PageKind.HOME)
    assert route.url == "/"
    assert route.destination(Path("out")) == Path("out/index.html")


def test_article_index_route():
    """The article listing lives at /articles/."""
    route = route_for(PageKind.ARTICLE_INDEX)
    assert route.url == "/articles/"
    assert route.destination(Path("out")) == Path("out/articles/index.html")


def test_article_route_scenario(make_article):
    """2024-03-15 falls in ISO week 11 of 2024."""
    route = route_for(PageKind.ARTICLE, make_article("hello", "2024-03-15"))
    assert route.url == "/2024/11/hello/"
    assert route.destination(Path("out")) == Path("out/2024/11/hello/index.html")


@pytest.mark.parametrize("date,url", [
    ("2024-12-30", "/2025/01/post/"),
    ("2021-01-03", "/2020/53/post/"),
    ("2023-01-01", "/2022/52/post/"),
    ("2026-01-01", "/2026/01/post/"),
    ("2027-01-01", "/2026/53/post/"),
    ("2024-01-07", "/2024/01/post/"),
])
def test_article_route_year_boundaries(make_article, date, url):
    """Dates near new year use the ISO week-numbering year."""
    assert article_route(make_article("post", date)).url == url


@pytest.mark.parametrize("year", [2015, 2020, 2024, 2026])
def test_article_route_matches_iso_weeks_for_full_year(make_article, year):
    """Every day of a year routes to the week given by the ISO-8601 definition."""
    day = dt.date(year, 1, 1)
    while day.year == year:
        iso_year, week = _iso_week_by_definition(day)
        route = article_route(make_article("post", day.isoformat()))
        assert route.segments == (f"{iso_year:04d}", f"{week:02d}", "post"), day
        day += dt.timedelta(days=1)


def test_page_route_uses_stem():
    """Standalone pages route to /<slug>/ without a date."""
    assert route_for(PageKind.PAGE, Path("pages/about.md")).url == "/about/"
    assert slug_for(Path("pages/my.page.md")) == "my.page"


def test_route_for_requires_item():
    """Article and page routes need their source."""
    with pytest.raises(TypeError):
        route_for(PageKind.ARTICLE)
    with pytest.raises(TypeError):
        route_for(PageKind.PAGE)


def test_check_unique_accepts_distinct_routes():
    """Distinct routes pass silently."""
    check_unique([(Route(), "home"), (Route(("about",)), "about.md")])


def test_check_unique_reports_collisions():
    """Each clashing route is reported with both owners."""
    routes = [
        (Route(("articles",)), "article index"),
        (Route(("articles",)), "pages/articles.md"),
        (Route(("2024", "11", "a")), "articles/a.md"),
        (Route(("2024", "11", "a")), "articles/old/a.md"),
    ]
    with pytest.raises(ContentError) as excinfo:
        check_unique(routes)
    assert excinfo.value.problems == [
        "pages/articles.md: route /articles/ already used by article index",
        "articles/old/a.md: route /2024/11/a/ already used by articles/a.md",
    ]
