from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path

import yaml

from .errors import ConfigError
from .utils import parse_int

DEFAULT_HOME_LIMIT = 10


@dataclass(frozen=True)
class Social:
    name: str
    icon_name: str
    url: str


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide settings shared by every page of a build.

    ``tagline`` and ``footer`` are Markdown and get processed like content.
    """

    title: str
    tagline: str
    footer: str
    socials: tuple[Social, ...] = ()
    stylesheets: tuple[str, ...] = ()
    home_limit: int = DEFAULT_HOME_LIMIT


def load_config(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    if suffix == ".toml":
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
        if data is None:
            data = {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}")
    return data


def _require_str(data: dict, key: str, where: str = "config") -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ConfigError(f"Missing or invalid '{key}' in {where} (expected a string).")
    return value


def _parse_socials(value: object) -> tuple[Social, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError("'socials' must be a list.")
    socials = []
    for idx, item in enumerate(value):
        if not isinstance(item, dict):
            raise ConfigError(f"socials[{idx}] must be a mapping with name, icon_name and url.")
        where = f"socials[{idx}]"
        socials.append(
            Social(
                name=_require_str(item, "name", where),
                icon_name=_require_str(item, "icon_name", where),
                url=_require_str(item, "url", where),
            )
        )
    return tuple(socials)


def _parse_stylesheets(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError("'stylesheets' must be a list of URLs.")
    return tuple(item for item in value if item.strip())


def site_config_from_dict(data: dict) -> SiteConfig:
    raw_limit = data.get("home_limit")
    home_limit = DEFAULT_HOME_LIMIT if raw_limit is None else parse_int(raw_limit, -1)
    if isinstance(raw_limit, bool) or home_limit < 0:
        raise ConfigError("'home_limit' must be zero (unlimited) or a positive whole number.")
    return SiteConfig(
        title=_require_str(data, "title"),
        tagline=_require_str(data, "tagline"),
        footer=_require_str(data, "footer"),
        socials=_parse_socials(data.get("socials")),
        stylesheets=_parse_stylesheets(data.get("stylesheets")),
        home_limit=home_limit,
    )
