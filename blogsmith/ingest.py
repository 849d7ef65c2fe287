from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .content import Document, process_document
from .errors import ContentError, DiscoveryError


@dataclass(frozen=True)
class Source:
    path: Path
    document: Document


def find_sources(content_dir: Path, pattern: str) -> list[Path]:
    if not content_dir.is_dir():
        raise DiscoveryError(f"Content directory not found: {content_dir}")
    pattern = pattern.strip()
    if not pattern:
        raise DiscoveryError("Content glob pattern is empty.")
    if Path(pattern).is_absolute():
        raise DiscoveryError(f"Content glob pattern must be relative to {content_dir}: {pattern}")
    if ".." in Path(pattern).parts:
        raise DiscoveryError(f"Content glob pattern must stay inside {content_dir}: {pattern}")
    try:
        matches = [path for path in content_dir.glob(pattern) if path.is_file()]
    except ValueError as exc:
        raise DiscoveryError(f"Invalid glob pattern {pattern!r}: {exc}") from exc
    except OSError as exc:
        raise DiscoveryError(f"Cannot scan {content_dir} for {pattern!r}: {exc}") from exc
    return sorted(matches, key=lambda p: p.as_posix())


def discover(content_dir: Path, pattern: str) -> list[Source]:
    """Process every file matching ``pattern`` under ``content_dir``.

    All files are attempted before failing so that a single run reports every
    broken document; any failure aborts the build.
    """
    sources = []
    problems = []
    for path in find_sources(content_dir, pattern):
        try:
            document = process_document(path)
        except UnicodeDecodeError as exc:
            problems.append(f"{path}: not valid UTF-8 ({exc.reason})")
            continue
        except (OSError, ValueError) as exc:
            problems.append(f"{path}: {exc}")
            continue
        sources.append(Source(path, document))
    if problems:
        raise ContentError(problems)
    return sources
