import pytest
import requests

from jira_linker.app import check
from jira_linker.kit.errors import ApiError, ConfigurationError
from jira_linker.reporting.report_builder import MISSING_ISSUES_MESSAGE
from jira_linker.tools.bitbucket_tools import BitbucketPullRequestHost

BASE = "https://bitbucket.example.com/rest/api/1.0"
PR = f"{BASE}/projects/PRJ/repos/app/pull-requests/7"


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload
        self.content = b"{}" if payload is not None else b""

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if (method, url) in self.routes:
            route = self.routes[(method, url)]
            return route(kwargs) if callable(route) else route
        return FakeResponse(200, {})


def _host(session):
    return BitbucketPullRequestHost(BASE + "/", "PRJ", "app", 7, auth=("bot", "pw"), session=session)


def test_get_title():
    session = FakeSession({("GET", PR): FakeResponse(200, {"title": "[KEY-1] Add thing"})})
    assert _host(session).get_pull_request_title() == "[KEY-1] Add thing"
    method, url, kwargs = session.requests[0]
    assert kwargs["auth"] == ("bot", "pw")


def test_commit_messages_paged_and_oldest_first():
    pages = {
        0: {"values": [{"message": "newest"}, {"message": "middle"}], "isLastPage": False, "nextPageStart": 2},
        2: {"values": [{"message": "oldest"}], "isLastPage": True},
    }
    session = FakeSession({("GET", f"{PR}/commits"): lambda kw: FakeResponse(200, pages[kw["params"]["start"]])})
    assert _host(session).get_commit_messages() == ["oldest", "middle", "newest"]
    assert len(session.requests) == 2


def test_annotations_posted_as_comments():
    session = FakeSession({})
    host = _host(session)
    host.post_message("links")
    host.post_warning("careful")
    host.post_failure("blocked")
    bodies = [kwargs["json"] for method, url, kwargs in session.requests]
    assert all(url == f"{PR}/comments" for _, url, _ in session.requests)
    assert bodies == [
        {"text": "links"},
        {"text": ":warning: careful"},
        {"text": "blocked", "severity": "BLOCKER"},
    ]
    assert host.failed


def test_check_against_bitbucket_fails_without_keys():
    session = FakeSession({("GET", PR): FakeResponse(200, {"title": "Refactor"})})
    host = _host(session)
    check(host, keys="KEY", base_url="https://jira.example.com/browse", fail_on_warning=True)
    method, url, kwargs = session.requests[-1]
    assert (method, url) == ("POST", f"{PR}/comments")
    assert kwargs["json"] == {"text": MISSING_ISSUES_MESSAGE, "severity": "BLOCKER"}
    assert host.failed


def test_http_error_raises_api_error():
    session = FakeSession({("GET", PR): FakeResponse(404, {"errors": []})})
    with pytest.raises(ApiError, match="404"):
        _host(session).get_pull_request_title()


def test_connection_error_raises_api_error(monkeypatch):
    class BrokenSession:
        def request(self, method, url, **kwargs):
            raise requests.ConnectionError("down")

    monkeypatch.setattr(BitbucketPullRequestHost._send.retry, "sleep", lambda seconds: None)
    with pytest.raises(ApiError, match="down"):
        _host(BrokenSession()).get_pull_request_title()


def test_missing_base_url():
    with pytest.raises(ConfigurationError):
        BitbucketPullRequestHost("", "PRJ", "app", 7)
