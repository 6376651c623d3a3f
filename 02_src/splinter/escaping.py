"""Escaping of values embedded in splinter log lines."""

from typing import Any

_RESERVED = frozenset("\\;\n=")
_ESCAPES = str.maketrans({"\\": "\\\\", ";": "\\;", "\n": "\\n", "=": "\\="})

MISSING_KEY_PREFIX = "_MISSING_KEY_"


def escape(value: Any) -> Any:
    """
    Escape backslashes, semicolons, newlines and equal signs.

    None and empty values are returned as is. Any other value is converted
    to its text form first. Text without reserved characters is returned
    unchanged (the same object), so escaping clean input costs one scan.

    A newline becomes the two characters backslash and ``n``; the other
    reserved characters keep their literal form behind a backslash.
    """
    if value is None:
        return None

    text = value if isinstance(value, str) else str(value)
    if not text:
        return text

    if not any(c in _RESERVED for c in text):
        return text

    return text.translate(_ESCAPES)


def missing_key(pair_index: int) -> str:
    """Placeholder key for the user data pair at ``pair_index``."""
    return f"{MISSING_KEY_PREFIX}{pair_index}"


def escape_user_data(user_key_value_pairs: tuple | list | None) -> list:
    """
    Flatten a variadic ``key, value, key, value, ...`` tail into escaped entries.

    An unpaired trailing key is dropped. Missing keys are replaced with
    ``_MISSING_KEY_<n>``.
    """
    if not user_key_value_pairs:
        return []

    count = len(user_key_value_pairs) - len(user_key_value_pairs) % 2
    entries = []
    for i in range(0, count, 2):
        key = escape(user_key_value_pairs[i])
        if not key:
            key = missing_key(i // 2)
        entries.append(key)
        entries.append(escape(user_key_value_pairs[i + 1]))
    return entries
