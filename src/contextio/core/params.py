"""
Pure functions for request parameter handling.

Allow-list filtering and account injection without I/O dependencies.
"""

from typing import Dict, Iterable, Mapping, Optional


def filter_params(
    given: Optional[Mapping[str, str]], allowed: Iterable[str]
) -> Dict[str, str]:
    """Keep only allow-listed parameters, matched case-insensitively.

    Output keys use the allow-list's casing. When several given keys match
    the same allowed name, the first one in ``given`` wins.
    """
    if not given:
        return {}

    lowered: Dict[str, str] = {}
    for key, value in given.items():
        lowered.setdefault(key.lower(), value)

    filtered = {}
    for name in allowed:
        if name.lower() in lowered:
            filtered[name] = lowered[name.lower()]
    return filtered


def with_account(params: Mapping[str, str], account: Optional[str]) -> Dict[str, str]:
    """Return a copy of ``params`` with ``account`` set when non-empty."""
    merged = dict(params)
    if account:
        merged["account"] = account
    return merged


def merge_fixed_params(
    params: Mapping[str, str], fixed: Mapping[str, str]
) -> Dict[str, str]:
    """Overlay an action's fixed parameters on top of caller parameters."""
    return {**params, **fixed}

