import logging
from typing import Iterable, List, Optional
from pydantic import BaseModel, Field

from jira_linker.config.check_config import CheckConfig
from jira_linker.kit.jira_key import scan_keys, unique_in_order

logger = logging.getLogger(__name__)


class ExtractionResult(BaseModel):
    title_keys: List[str] = Field(default_factory=list)
    commit_keys: List[str] = Field(default_factory=list)

    @property
    def keys(self) -> List[str]:
        # Deduplicated per source only; a key in both title and commits is listed twice.
        return self.title_keys + self.commit_keys

    @property
    def has_issues(self) -> bool:
        return bool(self.title_keys or self.commit_keys)


def extract_issues(
    config: CheckConfig,
    title: Optional[str] = None,
    commit_messages: Iterable[str] = (),
) -> ExtractionResult:
    pattern = config.pattern

    title_keys: List[str] = []
    if config.search_title:
        title_keys = unique_in_order(scan_keys(title, pattern))

    commit_keys: List[str] = []
    if config.search_commits:
        found = [key for message in commit_messages for key in scan_keys(message, pattern)]
        commit_keys = unique_in_order(found)

    logger.info("Issue keys found: title=%s commits=%s", title_keys, commit_keys)
    return ExtractionResult(title_keys=title_keys, commit_keys=commit_keys)
