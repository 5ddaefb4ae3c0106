import re
from typing import Iterable, List, Optional, Pattern, Sequence, Union

from jira_linker.kit.errors import ConfigurationError

KeySpec = Union[str, Sequence[str], None]


def normalize_keys(keys: KeySpec) -> tuple[str, ...]:
    """Return project keys as a tuple, accepting a single string or a sequence."""
    if keys is None:
        raise ConfigurationError("'key' missing - must supply JIRA issue key")
    keys = [keys] if isinstance(keys, str) else list(keys)
    cleaned = tuple(k.strip() for k in keys if isinstance(k, str))
    if not cleaned or len(cleaned) != len(keys) or not all(cleaned):
        raise ConfigurationError("'key' missing - must supply JIRA issue key")
    return cleaned


def build_key_pattern(keys: KeySpec) -> Pattern[str]:
    """Compile a regex matching ``[PREFIX-123]`` for any of ``keys``.

    Keys are tried as alternatives in the order given. The single capture
    group holds ``PREFIX-123`` without the brackets.
    """
    alternatives = "|".join(f"(?:{k})" for k in normalize_keys(keys))
    try:
        return re.compile(rf"\[((?:{alternatives})-[0-9]+)\]")
    except re.error as exc:
        raise ConfigurationError(f"Invalid JIRA issue key pattern: {exc}") from exc


def scan_keys(text: Optional[str], pattern: Pattern[str]) -> List[str]:
    if not text:
        return []
    return [m.group(1) for m in pattern.finditer(text)]


def unique_in_order(keys: Iterable[str]) -> List[str]:
    seen: List[str] = []
    for key in keys:
        if key not in seen:
            seen.append(key)
    return seen
