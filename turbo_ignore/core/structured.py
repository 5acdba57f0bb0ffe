"""Helpers for narrowing untyped JSON values.

Used where ``json.loads`` output enters the typed core.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a non-empty string value from a mapping.

    Returns None if missing, not a str, or empty. The value is returned
    as-is (no stripping) so names survive untouched.
    """
    value = table.get(key)
    if not isinstance(value, str) or not value:
        return None
    return value
