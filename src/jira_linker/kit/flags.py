from typing import Any

from jira_linker.kit.errors import ConfigurationError

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


def to_bool(value: Any, name: str = 'option') -> bool:
    """Parse a yes/no flag from a bool, 0/1 or one of the usual strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
    raise ConfigurationError(f"'{name}' must be true or false, got {value!r}")
