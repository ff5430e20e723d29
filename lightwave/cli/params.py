"""
Effect Parameter Parsing.

Turns repeated `--param key=value` options into the params mapping sent
with an effect start request.
"""

from typing import Any


def parse_value(value: str) -> Any:
    """
    Coerce a raw parameter value.

    true/false (any case) become booleans, then integers, then floats.
    Anything else stays a string. Non-finite floats stay strings since
    JSON cannot carry them.
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        number = float(value)
    except ValueError:
        return value
    if number != number or number in (float("inf"), float("-inf")):
        return value
    return number


def parse_params(pairs: list[str] | None) -> dict[str, Any]:
    """
    Parse key=value pairs. Later duplicates of a key win.

    Raises:
        ValueError: If a pair has no '=' or an empty key.
    """
    result: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid parameter '{pair}', expected key=value")
        result[key] = parse_value(value)
    return result
