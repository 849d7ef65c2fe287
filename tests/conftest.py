"""Shared fixtures: in-memory articles and an on-disk example site"""

import datetime as dt
from pathlib import Path

import pytest

from blogsmith.articles import Article
from blogsmith.config import SiteConfig, Social
from blogsmith.content import Document


BLOG_TOML = """\
title = "My Blog"
tagline = "Notes on *things*"
footer = "Written by [me](/about/)"
stylesheets = ["https://fonts.example.com/serif.css", "extra.css"]

[[socials]]
name = "GitHub"
icon_name = "github"
url = "https://github.com/example"

[[socials]]
name = "Mastodon"
icon_name = "mastodon"
url = "https://social.example/@me"
"""


@pytest.fixture
def make_article():
    """Factory for Article objects without touching the filesystem."""
    def _make(slug="hello", date="2024-03-15", title="Hello", summary=None, body="<p>Body</p>"):
        document = Document(title=title, date=date, draft=False, body=body, summary=summary)
        return Article(document, Path("articles") / f"{slug}.md", dt.date.fromisoformat(date))
    return _make


@pytest.fixture
def site():
    return SiteConfig(
        title="My Blog",
        tagline="Notes on *things*",
        footer="Written by me",
        socials=(Social("GitHub", "github", "https://github.com/example"),),
        stylesheets=("https://fonts.example.com/serif.css", "extra.css"),
    )


@pytest.fixture
def blog_dir(tmp_path, monkeypatch):
    """A content tree with a config, two articles, a draft, an undated note and an about page."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "blog.toml").write_text(BLOG_TOML, encoding="utf-8")
    articles = tmp_path / "articles"
    (articles / "2024").mkdir(parents=True)
    (articles / "hello.md").write_text(
        "---\ntitle: Hello\ndate: 2024-03-15\n---\nHello body.\n", encoding="utf-8"
    )
    (articles / "2024" / "summer.md").write_text(
        "---\ndate: 2024-06-01\nsummary: A *short* summary.\n---\n# Summer\n\nLong body.\n",
        encoding="utf-8",
    )
    (articles / "secret.md").write_text(
        "---\ntitle: Secret\ndate: 2024-03-10\ndraft: true\n---\nNot yet.\n", encoding="utf-8"
    )
    (articles / "notes.md").write_text("---\ntitle: Notes\n---\nNo date here.\n", encoding="utf-8")
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / "about.md").write_text("# About me\n\nHi there.\n", encoding="utf-8")
    return tmp_path
