from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Pattern

from jira_linker.kit.errors import ConfigurationError
from jira_linker.kit.flags import to_bool
from jira_linker.kit.jira_key import KeySpec, build_key_pattern, normalize_keys

DEFAULT_EMOJI = ":link:"
FLAG_FIELDS = ("search_title", "search_commits", "fail_on_warning", "report_missing")


@dataclass(frozen=True)
class CheckConfig:
    """Immutable options for one pull request check.

    Parameters
    ----------
    keys:
        Jira project keys to look for, e.g. ``("KEY", "JIRA")``. A single
        string is accepted and stored as a one-element tuple.
    base_url:
        Jira browse URL; issue keys are appended to it.
    emoji:
        Prefix of the informational message.
    search_title, search_commits:
        Which parts of the pull request are scanned.
    fail_on_warning:
        Report missing keys as a blocking failure instead of a warning.
    report_missing:
        Report anything at all when no keys are found.

    Raises
    ------
    ConfigurationError
        If ``keys`` or ``base_url`` is missing or empty, a key is not a valid
        pattern, or a flag is not a yes/no value.
    """

    keys: KeySpec
    base_url: str
    emoji: str = DEFAULT_EMOJI
    search_title: bool = True
    search_commits: bool = False
    fail_on_warning: bool = False
    report_missing: bool = True
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", normalize_keys(self.keys))
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigurationError("'url' missing - must supply JIRA installation URL")
        object.__setattr__(self, "base_url", self.base_url.strip())
        if self.emoji is None:
            object.__setattr__(self, "emoji", DEFAULT_EMOJI)
        for name in FLAG_FIELDS:
            object.__setattr__(self, name, to_bool(getattr(self, name), name))
        object.__setattr__(self, "pattern", build_key_pattern(self.keys))

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "CheckConfig":
        """Build a config from a plain mapping, accepting ``key``/``url`` aliases."""
        options = canonical_options(data)
        unknown = set(options) - {f.name for f in fields(cls) if f.init}
        if unknown:
            raise ConfigurationError(f"Unknown check option(s): {', '.join(sorted(unknown))}")
        return cls(
            keys=options.get("keys"),
            base_url=options.get("base_url"),  # type: ignore[arg-type]
            **{k: v for k, v in options.items() if k not in ("keys", "base_url")},
        )


def canonical_options(data: Dict[str, Any]) -> Dict[str, Any]:
    """Rename the short ``key``/``url`` option names to field names."""
    options = dict(data)
    for alias, name in _ALIASES.items():
        if alias in options:
            value = options.pop(alias)
            options.setdefault(name, value)
    return options


_ALIASES = {"key": "keys", "url": "base_url"}
