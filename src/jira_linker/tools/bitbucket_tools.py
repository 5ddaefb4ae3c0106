import logging
from typing import Any, Dict, List, Optional

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from jira_linker.config.settings import Settings
from jira_linker.kit.errors import ApiError, ConfigurationError

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
WARNING_PREFIX = ":warning: "


class BitbucketPullRequestHost:
    """Pull request host backed by the Bitbucket Server/DC REST API (1.0).

    Parameters
    ----------
    base_url:
        REST root, e.g. ``https://bitbucket.example.com/rest/api/1.0``.
    project, repo, pr_id:
        Identify the pull request being checked.
    auth:
        ``(user, app_password)`` for basic auth.
    """

    def __init__(
        self,
        base_url: str,
        project: str,
        repo: str,
        pr_id: int,
        auth: Optional[tuple[str, str]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url:
            raise ConfigurationError("BITBUCKET_BASE_URL missing - must supply Bitbucket REST URL")
        self._pr_path = f"{base_url.rstrip('/')}/projects/{project}/repos/{repo}/pull-requests/{pr_id}"
        self._auth = auth
        self._session = session or requests.Session()
        self.failed = False

    @classmethod
    def from_settings(cls, settings: Settings, project: str, repo: str, pr_id: int) -> "BitbucketPullRequestHost":
        auth = None
        if settings.bitbucket_email:
            auth = (settings.bitbucket_email, settings.bitbucket_app_password)
        return cls(settings.bitbucket_base_url, project, repo, pr_id, auth=auth)

    @retry(
        retry=retry_if_exception_type(requests.RequestException),
        wait=wait_fixed(2),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        logger.debug("Bitbucket %s %s", method, url)
        return self._session.request(method, url, auth=self._auth, timeout=10, **kwargs)

    def _request(self, method: str, path: str = "", **kwargs) -> Dict[str, Any]:
        url = f"{self._pr_path}{path}"
        try:
            resp = self._send(method, url, **kwargs)
        except requests.RequestException as exc:
            raise ApiError(f"Bitbucket request failed: {exc}") from exc
        if not resp.ok:
            raise ApiError(f"Bitbucket API error: {resp.status_code}")
        return resp.json() if resp.content else {}

    def get_pull_request_title(self) -> str:
        return self._request("GET").get("title") or ""

    def get_commit_messages(self) -> List[str]:
        """Return commit messages oldest first.

        Bitbucket pages commits newest first, so the collected list is reversed.
        """
        start = 0
        messages: List[str] = []
        while True:
            payload = self._request("GET", "/commits", params={"start": start, "limit": PAGE_SIZE})
            messages.extend(c.get("message", "") or "" for c in payload.get("values", []))
            if payload.get("isLastPage", True) or payload.get("nextPageStart") is None:
                break
            start = payload["nextPageStart"]
        messages.reverse()
        return messages

    def _comment(self, text: str, severity: Optional[str] = None) -> None:
        body: Dict[str, Any] = {"text": text}
        if severity:
            body["severity"] = severity
        self._request("POST", "/comments", json=body)

    def post_message(self, text: str) -> None:
        self._comment(text)

    def post_warning(self, text: str) -> None:
        self._comment(f"{WARNING_PREFIX}{text}")

    def post_failure(self, text: str) -> None:
        # A BLOCKER comment opens a task, which blocks merge under the task merge check.
        self._comment(text, severity="BLOCKER")
        self.failed = True
