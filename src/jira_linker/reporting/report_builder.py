from __future__ import annotations

from typing import List

MISSING_ISSUES_MESSAGE = (
    "This PR does not contain any JIRA issue keys in the PR title or commit messages (e.g. KEY-123)"
)


def ensure_trailing_slash(url: str) -> str:
    """Return ``url`` ending in exactly one slash."""
    return url.rstrip("/") + "/"


def link(href: str, issue: str) -> str:
    return f"<a href='{href}{issue}'>{issue}</a>"


def build_links_message(emoji: str, base_url: str, keys: List[str]) -> str:
    """Render ``"<emoji> <link1>, <link2>, ..."`` for the given issue keys."""
    href = ensure_trailing_slash(base_url)
    links = ", ".join(link(href, key) for key in keys)
    return f"{emoji} {links}"
