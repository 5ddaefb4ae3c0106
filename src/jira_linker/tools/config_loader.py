from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from jira_linker.config.check_config import CheckConfig
from jira_linker.kit.errors import ConfigurationError


def read_check_options(path: str | Path) -> Dict[str, Any]:
    """Read the raw check options from a YAML (or JSON) file.

    Options live either at the top level or under a ``jira`` mapping::

        jira:
          key: [KEY, JIRA]
          url: https://myjira.atlassian.net/browse
          search_commits: true

    Raises
    ------
    ConfigurationError
        If the file is missing, unparsable or not a mapping.
    """

    p = Path(path)
    if not p.exists():
        raise ConfigurationError(f"Config file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid config file {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError("Config must be a mapping of check options")
    section = data.get("jira", data)
    if not isinstance(section, dict):
        raise ConfigurationError("Config 'jira' section must be a mapping")
    return dict(section)


def load_config(path: str | Path) -> CheckConfig:
    """Load and validate a check configuration file.

    Parameters
    ----------
    path:
        Path to the YAML or JSON file.

    Returns
    -------
    CheckConfig
        Parsed configuration.

    Raises
    ------
    ConfigurationError
        If the file is missing or invalid.
    """

    return CheckConfig.from_mapping(read_check_options(path))
