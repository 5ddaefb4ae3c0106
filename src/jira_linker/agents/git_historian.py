import logging
from typing import List, Optional
from pydantic import BaseModel, Field

from jira_linker.config.check_config import CheckConfig
from jira_linker.kit.ports import PullRequestHost

logger = logging.getLogger(__name__)


class PullRequestText(BaseModel):
    title: Optional[str] = None
    commit_messages: List[str] = Field(default_factory=list)


def collect_sources(host: PullRequestHost, config: CheckConfig) -> PullRequestText:
    """Fetch only the pull request text the config asks to scan."""
    title = host.get_pull_request_title() if config.search_title else None
    messages = list(host.get_commit_messages()) if config.search_commits else []
    logger.debug("Collected title=%s commits=%d", title is not None, len(messages))
    return PullRequestText(title=title, commit_messages=[m or '' for m in messages])
