from __future__ import annotations


class SiteError(Exception):
    """Base class for every error that aborts a build."""


class ConfigError(SiteError):
    pass


class DiscoveryError(SiteError):
    pass


class OutputError(SiteError):
    pass


class ContentError(SiteError):
    """One or more documents cannot be published.

    Collects every problem found so authors can fix them in a single pass.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.problems) == 1:
            return self.problems[0]
        lines = [f"{len(self.problems)} content problems:"]
        lines.extend(f"  {problem}" for problem in self.problems)
        return "\n".join(lines)
