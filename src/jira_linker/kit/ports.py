"""Ports (interfaces) used by the check.

The host is whatever code-review tool owns the pull request. The check only
needs the narrow surface below, so it can run against Bitbucket, an
in-memory recorder, or anything else that provides these calls.
"""

from __future__ import annotations

from typing import List, Protocol


class PullRequestHost(Protocol):
    """Pull request data and annotation operations required by the check."""

    def get_pull_request_title(self) -> str:
        ...

    def get_commit_messages(self) -> List[str]:
        ...

    def post_message(self, text: str) -> None:
        ...

    def post_warning(self, text: str) -> None:
        ...

    def post_failure(self, text: str) -> None:
        ...
