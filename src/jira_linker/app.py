import logging
from typing import Optional

from jira_linker.agents.git_historian import collect_sources
from jira_linker.agents.jira_analyst import extract_issues
from jira_linker.agents.publisher import PublishResult, publish
from jira_linker.config.check_config import DEFAULT_EMOJI, CheckConfig
from jira_linker.kit.jira_key import KeySpec
from jira_linker.kit.ports import PullRequestHost

logger = logging.getLogger(__name__)


def run_check(host: PullRequestHost, config: CheckConfig) -> PublishResult:
    """Scan the pull request and post the resulting annotation.

    Returns what was posted so callers can derive an exit status.
    """
    sources = collect_sources(host, config)
    result = extract_issues(config, sources.title, sources.commit_messages)
    return publish(host, config, result)


def check(
    host: PullRequestHost,
    keys: KeySpec = None,
    base_url: Optional[str] = None,
    emoji: str = DEFAULT_EMOJI,
    search_title: bool = True,
    search_commits: bool = False,
    fail_on_warning: bool = False,
    report_missing: bool = True,
) -> None:
    """Check a pull request for Jira keys and link them.

    ``keys`` may be a single project key (``"KEY"``) or a sequence of keys.
    Raises :class:`~jira_linker.kit.errors.ConfigurationError` before touching
    ``host`` when ``keys`` or ``base_url`` is missing.
    """
    config = CheckConfig(
        keys=keys,
        base_url=base_url,  # type: ignore[arg-type]
        emoji=emoji,
        search_title=search_title,
        search_commits=search_commits,
        fail_on_warning=fail_on_warning,
        report_missing=report_missing,
    )
    run_check(host, config)
