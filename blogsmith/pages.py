from __future__ import annotations

import datetime as dt
import html
from pathlib import Path
from typing import Optional

from .articles import Article, latest_first, require_title
from .assets import AssetManifest
from .config import SiteConfig, Social
from .content import Document, process_fragment, render_markdown
from .routes import article_route
from .utils import format_date

SEPARATOR = "❧"
ICON_SPRITE = "icons.svg"
MAIN_STYLESHEET = "main.css"
DEV_SCRIPT = "main.js"


def build_date(value: dt.date) -> str:
    text = format_date(value)
    return f'<time datetime="{text}">{text}</time>'


def build_preview(article: Article) -> str:
    url = article_route(article).url
    summary = article.document.summary
    summary_html = f'<div class="summary">{summary}</div>' if summary else ""
    return (
        '<article class="preview">'
        f"{build_date(article.date)}"
        f'<h3><a href="{html.escape(url)}">{html.escape(article.title)}</a></h3>'
        f"{summary_html}"
        "</article>"
    )


def build_previews(articles: list[Article]) -> str:
    return "\n".join(build_preview(article) for article in articles)


def build_home(site: SiteConfig, articles: list[Article]) -> str:
    tagline = render_markdown(site.tagline).strip()
    tagline_html = f'<div class="tagline">{tagline}</div>' if tagline else ""
    latest = latest_first(articles)
    if site.home_limit:
        latest = latest[: site.home_limit]
    hero = (
        '<div class="main-wrapper">'
        '<header class="home">'
        f"<h1>{html.escape(site.title)}</h1>"
        f"{tagline_html}"
        "</header>"
        "</div>"
    )
    sections = [hero]
    if latest:
        sections.append(
            '<div class="main-wrapper">'
            "<header><h2>Latest articles</h2></header>\n"
            f"{build_previews(latest)}"
            "</div>"
        )
    return "<main>" + "\n".join(sections) + "</main>"


def build_article_index(articles: list[Article]) -> str:
    previews = build_previews(latest_first(articles))
    return (
        '<main class="main-wrapper">'
        "<header><h1>Articles</h1></header>\n"
        f"{previews}"
        "</main>"
    )


def build_article(article: Article) -> str:
    summary = article.document.summary
    abstract = ""
    if summary:
        abstract = (
            '<div class="abstract">'
            f"{summary}"
            f'<div class="separator" aria-hidden="true">{SEPARATOR}</div>'
            "</div>\n"
        )
    return (
        '<main class="main-wrapper">'
        '<article class="post">'
        "<header>"
        f"{build_date(article.date)}"
        f"<h1>{html.escape(article.title)}</h1>"
        "</header>\n"
        f"{abstract}"
        f'<div class="post-body">{article.document.body}</div>'
        "</article>"
        "</main>"
    )


def build_standalone(document: Document, path: Path) -> str:
    title = require_title(document, path)
    return (
        '<main class="main-wrapper">'
        '<article class="page">'
        f"<header><h1>{html.escape(title)}</h1></header>\n"
        f'<div class="post-body">{document.body}</div>'
        "</article>"
        "</main>"
    )


def is_absolute_url(value: str) -> bool:
    return value.startswith(("/", "data:")) or "://" in value


def build_social(social: Social, manifest: AssetManifest) -> str:
    icon = f"{manifest.resolve(ICON_SPRITE)}#{social.icon_name}"
    name = html.escape(social.name)
    return (
        f'<a href="{html.escape(social.url)}" target="_blank" rel="noopener" title="{name}">'
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 30 30" aria-label="{name}">'
        f'<use href="{html.escape(icon)}"></use>'
        "</svg>"
        f"<span>{name}</span>"
        "</a>"
    )


def build_nav(site: SiteConfig, manifest: AssetManifest) -> str:
    socials = ""
    if site.socials:
        socials = '<span class="separator"></span>' + "".join(
            build_social(social, manifest) for social in site.socials
        )
    return (
        "<nav>"
        '<div class="wrapper">'
        f'<a href="/">{html.escape(site.title)}</a>'
        '<a href="/articles/">Articles</a>'
        '<a href="/about/">About</a>'
        f"{socials}"
        "</div>"
        "</nav>"
    )


def build_head(
    site: SiteConfig, manifest: AssetManifest, title: Optional[str], production: bool
) -> str:
    page_title = f"{title} | {site.title}" if title else site.title
    parts = [
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f"<title>{html.escape(page_title)}</title>",
    ]
    stylesheets = [
        value if is_absolute_url(value) else manifest.resolve(value) for value in site.stylesheets
    ]
    # In development the stylesheet is injected by main.js.
    if production:
        stylesheets.append(manifest.resolve(MAIN_STYLESHEET))
    for href in stylesheets:
        parts.append(f'<link rel="stylesheet" type="text/css" href="{html.escape(href)}">')
    return "<head>\n" + "\n".join(parts) + "\n</head>"


def build_footer(site: SiteConfig) -> str:
    footer = process_fragment(site.footer)
    if not footer:
        return ""
    return (
        "<footer>"
        f'<div class="separator" aria-hidden="true">{SEPARATOR}</div>'
        f"{footer}"
        "</footer>"
    )


def layout(
    site: SiteConfig,
    manifest: AssetManifest,
    content: str,
    *,
    title: Optional[str] = None,
    production: bool = False,
) -> str:
    """Wrap page content in the shared document shell (head, nav, footer)."""
    body = [build_nav(site, manifest), content]
    footer = build_footer(site)
    if footer:
        body.append(footer)
    if not production:
        src = html.escape(manifest.resolve(DEV_SCRIPT))
        body.append(f'<script type="text/javascript" src="{src}"></script>')
    return (
        '<html lang="en">\n'
        f"{build_head(site, manifest, title, production)}\n"
        "<body>\n"
        + "\n".join(body)
        + "\n</body>\n"
        "</html>"
    )
