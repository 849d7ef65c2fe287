from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Iterator, Optional

from .articles import Article, check_titles, select_articles
from .assets import AssetManifest, load_manifest
from .config import SiteConfig, load_config, site_config_from_dict
from .errors import ContentError, SiteError
from .ingest import Source, discover
from .pages import build_article, build_article_index, build_home, build_standalone, layout
from .render import Page, write_page
from .routes import PageKind, Route, check_unique, route_for
from .utils import clean_output_dir, parse_bool

DEFAULT_CONFIG = "blog.toml"
DEFAULT_ARTICLES = "articles/**/*.md"
DEFAULT_PAGES = "pages/*.md"


def discover_all(content_dir: Path, patterns: list[str]) -> list[list[Source]]:
    """Run discovery for each pattern, reporting content problems from all of them at once."""
    results = []
    problems = []
    for pattern in patterns:
        try:
            results.append(discover(content_dir, pattern))
        except ContentError as exc:
            problems.extend(exc.problems)
    if problems:
        raise ContentError(problems)
    return results


def planned_routes(articles: list[Article], pages: list[Source]) -> list[tuple[Route, str]]:
    routes = [
        (route_for(PageKind.HOME), "home page"),
        (route_for(PageKind.ARTICLE_INDEX), "article index"),
    ]
    routes.extend((route_for(PageKind.ARTICLE, article), str(article.path)) for article in articles)
    routes.extend((route_for(PageKind.PAGE, source.path), str(source.path)) for source in pages)
    return routes


def iter_pages(
    site: SiteConfig,
    manifest: AssetManifest,
    articles: list[Article],
    pages: list[Source],
    production: bool,
) -> Iterator[Page]:
    def wrap(content: str, title: Optional[str] = None) -> str:
        return layout(site, manifest, content, title=title, production=production)

    yield Page(route_for(PageKind.HOME), wrap(build_home(site, articles)))
    yield Page(route_for(PageKind.ARTICLE_INDEX), wrap(build_article_index(articles), "Articles"))
    for article in articles:
        yield Page(route_for(PageKind.ARTICLE, article), wrap(build_article(article), article.title))
    for source in pages:
        content = build_standalone(source.document, source.path)
        yield Page(route_for(PageKind.PAGE, source.path), wrap(content, source.document.title))


def build_site(args: argparse.Namespace, config: dict) -> int:
    project_root = Path.cwd()
    content_dir = Path(args.content)
    output_dir = Path(args.output)

    site = site_config_from_dict(config)
    manifest = load_manifest(Path(args.manifest) if args.manifest else None)

    article_sources, page_sources = discover_all(content_dir, [args.articles, args.pages])
    articles = select_articles(article_sources)
    skipped = len(article_sources) - len(articles)

    check_titles([*articles, *page_sources])
    check_unique(planned_routes(articles, page_sources))

    if args.clean:
        clean_output_dir(output_dir, project_root)

    written = 0
    for page in iter_pages(site, manifest, articles, page_sources, args.production):
        write_page(page, output_dir)
        written += 1
    print(f"Built {len(articles)} articles ({skipped} skipped), {len(page_sources)} pages.")
    return written


def build_parser(config: dict, config_path: str) -> argparse.ArgumentParser:
    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = config.get(key)
        return default if value is None else parse_bool(value)

    parser = argparse.ArgumentParser(description="Static blog builder.")
    parser.add_argument("--config", default=config_path, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument(
        "--content",
        default=cfg_str("content", "."),
        help="Directory the article and page patterns are matched in.",
    )
    parser.add_argument(
        "--articles",
        default=cfg_str("articles", DEFAULT_ARTICLES),
        help="Glob pattern for dated articles.",
    )
    parser.add_argument(
        "--pages",
        default=cfg_str("pages", DEFAULT_PAGES),
        help="Glob pattern for standalone pages.",
    )
    parser.add_argument("--output", default=cfg_str("output", "output"), help="Output directory for the site.")
    parser.add_argument(
        "--production",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Link the built stylesheet instead of the development script.",
    )
    parser.add_argument("--manifest", default=None, help="Path to a JSON asset manifest.")
    parser.add_argument(
        "--clean",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("clean", False),
        help="Remove the output directory before building.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default=DEFAULT_CONFIG)
    pre_args, _ = pre_parser.parse_known_args(argv)

    start = time.perf_counter()
    try:
        config = load_config(Path(pre_args.config))
        args = build_parser(config, pre_args.config).parse_args(argv)
        build_site(args, config)
    except SiteError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {args.output}")
    return 0
