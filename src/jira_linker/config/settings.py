from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_linker.config.check_config import DEFAULT_EMOJI, CheckConfig
from jira_linker.kit.flags import to_bool

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Field names double as environment variable names (case-insensitive).

    # Jira (links only; the tracker itself is never queried)
    JIRA_KEYS: str = ''
    JIRA_BASE_URL: str = ''
    JIRA_EMOJI: str = DEFAULT_EMOJI
    JIRA_SEARCH_TITLE: bool = True
    JIRA_SEARCH_COMMITS: bool = False
    JIRA_FAIL_ON_WARNING: bool = False
    JIRA_REPORT_MISSING: bool = True

    # Bitbucket (REST root, e.g. https://bitbucket.example.com/rest/api/1.0)
    bitbucket_base_url: str = ''
    bitbucket_email: str = ''
    bitbucket_app_password: str = ''

    # Logging
    LOG_LEVEL: str = 'INFO'
    LOG_PATH: str = 'logs/jira-pr-linker.log'

    @field_validator(
        'JIRA_SEARCH_TITLE',
        'JIRA_SEARCH_COMMITS',
        'JIRA_FAIL_ON_WARNING',
        'JIRA_REPORT_MISSING',
        mode='before',
    )
    def _boolify(cls, v, info):  # type: ignore
        return to_bool(v, info.field_name)

    def jira_keys(self) -> list[str]:
        return [k.strip() for k in self.JIRA_KEYS.split(',') if k.strip()]

    def check_options(self) -> dict:
        return {
            'keys': self.jira_keys(),
            'base_url': self.JIRA_BASE_URL,
            'emoji': self.JIRA_EMOJI,
            'search_title': self.JIRA_SEARCH_TITLE,
            'search_commits': self.JIRA_SEARCH_COMMITS,
            'fail_on_warning': self.JIRA_FAIL_ON_WARNING,
            'report_missing': self.JIRA_REPORT_MISSING,
        }

    def to_check_config(self) -> CheckConfig:
        """Build a validated :class:`CheckConfig` from the environment."""
        return CheckConfig.from_mapping(self.check_options())
