"""Boolean attribute parsing for catalog markup.

Invariants:
    - Never raises: absent or unparseable values resolve to the caller's default
    - Comparison is case-insensitive and ignores surrounding whitespace
"""

_TRUE_VALUES = frozenset({"true", "on", "yes", "1"})
_FALSE_VALUES = frozenset({"false", "off", "no", "0"})


def parse_boolean(value: str | bool | None, default: bool = False) -> bool:
    """Parse an attribute value as a boolean, falling back to default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default
