import dataclasses

import pytest

from jira_linker.config.check_config import CheckConfig
from jira_linker.config.settings import Settings
from jira_linker.kit.errors import ConfigurationError


def test_single_key_normalized_to_tuple():
    cfg = CheckConfig(keys="KEY", base_url="https://x")
    assert cfg.keys == ("KEY",)


def test_config_is_frozen():
    cfg = CheckConfig(keys=["KEY"], base_url="https://x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.emoji = ":x:"  # type: ignore[misc]


def test_missing_key_reported_before_url():
    with pytest.raises(ConfigurationError, match="'key' missing"):
        CheckConfig(keys=None, base_url=None)  # type: ignore[arg-type]


@pytest.mark.parametrize("url", [None, "", "   "])
def test_missing_url(url):
    with pytest.raises(ConfigurationError, match="'url' missing"):
        CheckConfig(keys="KEY", base_url=url)  # type: ignore[arg-type]


def test_settings_to_check_config():
    settings = Settings(
        JIRA_KEYS="KEY, JIRA",
        JIRA_BASE_URL="https://jira.example.com/browse",
        JIRA_SEARCH_COMMITS="yes",
        JIRA_REPORT_MISSING="off",
    )
    cfg = settings.to_check_config()
    assert cfg.keys == ("KEY", "JIRA")
    assert cfg.search_commits is True
    assert cfg.report_missing is False
    assert cfg.search_title is True


def test_settings_without_keys_is_configuration_error():
    settings = Settings(JIRA_KEYS="", JIRA_BASE_URL="https://jira.example.com/browse")
    with pytest.raises(ConfigurationError):
        settings.to_check_config()


@pytest.mark.parametrize("value, expected", [("false", False), ("On", True), (0, False), (1, True), (True, True)])
def test_flags_parsed_at_construction(value, expected):
    cfg = CheckConfig(keys="KEY", base_url="https://x", report_missing=value)
    assert cfg.report_missing is expected


@pytest.mark.parametrize("value", ["maybe", 2, None])
def test_invalid_flag_is_configuration_error(value):
    with pytest.raises(ConfigurationError, match="search_commits"):
        CheckConfig(keys="KEY", base_url="https://x", search_commits=value)


def test_pattern_compiled_at_construction():
    cfg = CheckConfig(keys=["KEY", "JIRA"], base_url="https://x")
    assert cfg.pattern.findall("[JIRA-5] and [KEY-9]") == ["JIRA-5", "KEY-9"]


def test_settings_fields_have_no_deprecated_env_extra():
    assert all(f.json_schema_extra is None for f in Settings.model_fields.values())


def test_settings_invalid_bool_is_configuration_error():
    with pytest.raises(ConfigurationError, match="JIRA_FAIL_ON_WARNING"):
        Settings(JIRA_FAIL_ON_WARNING="sometimes")
