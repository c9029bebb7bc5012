# ============================================================================
# NAMING UTILITIES
# ============================================================================
# STATUS: Core - Identifier case conversion and text block helpers
# PURPOSE: Map SQL snake_case names to TypeScript identifiers
# CREATED: 18 OCT 2026
# ============================================================================
"""
Naming Utilities

    to_camel_case("the_level")     -> "theLevel"
    to_pascal_case("order_status") -> "OrderStatus"
    to_pascal_case("in-progress")  -> "InProgress"
"""

import re
from typing import Iterable, List

_WORD_SEPARATOR = re.compile(r"[^0-9A-Za-z]+")


def _words(value: str) -> List[str]:
    return [w for w in _WORD_SEPARATOR.split(value) if w]


def _safe_identifier(identifier: str) -> str:
    """TypeScript identifiers cannot start with a digit."""
    if identifier and identifier[0].isdigit():
        return f"_{identifier}"
    return identifier


def to_camel_case(value: str) -> str:
    """First word kept as is, following words capitalized."""
    words = _words(value)
    if not words:
        return value
    head, tail = words[0], words[1:]
    return _safe_identifier(head + "".join(w[0].upper() + w[1:] for w in tail))


def to_pascal_case(value: str) -> str:
    words = _words(value)
    if not words:
        return value
    return _safe_identifier("".join(w[0].upper() + w[1:] for w in words))


def pluralize(count: int) -> str:
    return "" if count == 1 else "s"


def join_blocks(blocks: Iterable[str], separator: str = "\n\n") -> str:
    """Join non-empty text blocks, dropping separators around empty ones."""
    return separator.join(b for b in blocks if b)


__all__ = [
    "to_camel_case",
    "to_pascal_case",
    "pluralize",
    "join_blocks",
]
