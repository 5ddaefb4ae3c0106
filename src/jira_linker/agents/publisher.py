import logging
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel

from jira_linker.agents.jira_analyst import ExtractionResult
from jira_linker.config.check_config import CheckConfig
from jira_linker.kit.ports import PullRequestHost
from jira_linker.reporting.report_builder import MISSING_ISSUES_MESSAGE, build_links_message

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    MESSAGE = 'message'
    WARNING = 'warning'
    FAILURE = 'failure'
    NOTHING = 'nothing'


class PublishResult(BaseModel):
    keys: List[str]
    outcome: Outcome
    text: Optional[str] = None


def publish(host: PullRequestHost, config: CheckConfig, result: ExtractionResult) -> PublishResult:
    """Post exactly one annotation (or none) for the extracted keys."""
    keys = result.keys
    if keys and result.has_issues:
        text = build_links_message(config.emoji, config.base_url, keys)
        host.post_message(text)
        outcome = Outcome.MESSAGE
    elif not config.report_missing:
        logger.info("No issue keys found; reporting disabled")
        return PublishResult(keys=[], outcome=Outcome.NOTHING)
    elif config.fail_on_warning:
        text = MISSING_ISSUES_MESSAGE
        host.post_failure(text)
        outcome = Outcome.FAILURE
    else:
        text = MISSING_ISSUES_MESSAGE
        host.post_warning(text)
        outcome = Outcome.WARNING

    logger.info("Posted %s: %s", outcome.value, text)
    return PublishResult(keys=keys, outcome=outcome, text=text)
