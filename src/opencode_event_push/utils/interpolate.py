"""
Module: interpolate.py
Description: {env:NAME} substitution for parsed configuration documents.

Walks JSON-derived values (dicts, lists, scalars) and replaces every
{env:NAME} token inside string leaves with the value of the environment
variable NAME, or an empty string when it is unset. Keys are never touched.
"""

import os
import re
from typing import Any, Mapping, Optional

ENV_TOKEN = re.compile(r"\{env:([^}]+)\}")


def interpolate(value: Any, environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Substitute {env:NAME} tokens in every string inside value.

    Args:
        value: JSON-like value (str, list, dict, number, bool or None)
        environ: Variable lookup, defaults to os.environ

    Returns:
        A value of the same shape with tokens replaced. Non-container,
        non-string values are returned as-is.

    Examples:
        >>> interpolate("prefix-{env:TEST_VAR}-suffix", {"TEST_VAR": "hello"})
        'prefix-hello-suffix'
        >>> interpolate({"headers": ["{env:MISSING}"]}, {})
        {'headers': ['']}
    """
    if environ is None:
        environ = os.environ

    if isinstance(value, str):
        return ENV_TOKEN.sub(lambda match: environ.get(match.group(1), ""), value)
    if isinstance(value, list):
        return [interpolate(item, environ) for item in value]
    if isinstance(value, dict):
        return {key: interpolate(item, environ) for key, item in value.items()}
    return value
