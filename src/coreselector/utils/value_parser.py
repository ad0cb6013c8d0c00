"""
Parsing of the host's external selection values.

The host sends a default value either as a plain id or as a JSON-encoded
string or array of ids.
"""

import json
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


def parse_default_value(default_value: Optional[str]) -> Optional[str]:
    """
    Extract the id to select from an encoded default value.

    Args:
        default_value: Raw value from the host

    Returns:
        The first id of a JSON array, a decoded JSON string, or the raw
        text otherwise, so numeric-looking ids such as "1.50" are kept as
        sent. None when there is nothing to select (empty input, empty
        array, JSON null).

    Example:
        >>> parse_default_value('["s1", "s2"]')
        's1'
        >>> parse_default_value('SCENARIO_abc')
        'SCENARIO_abc'
    """
    if not default_value:
        return None

    try:
        parsed: Any = json.loads(default_value)
    except (TypeError, ValueError):
        logger.debug(f"Default value is not JSON, using it as an id: {default_value!r}")
        return default_value

    if isinstance(parsed, list):
        if not parsed or parsed[0] is None:
            return None
        first = parsed[0]
        return first if isinstance(first, str) else json.dumps(first)

    if parsed is None:
        return None
    if isinstance(parsed, str):
        return parsed
    # Non-string scalar or object: the text itself is the id
    return default_value
