"""Lenient boolean token parsing."""
from __future__ import annotations

from typing import Optional

TRUE_TOKENS = frozenset({"true", "t", "yes", "y", "1", "on"})
FALSE_TOKENS = frozenset({"false", "f", "no", "n", "0", "off"})


def parse_lenient_bool(token: str) -> Optional[bool]:
    """Return the boolean spelled by ``token`` or ``None`` when unrecognised."""

    text = token.strip().lower()
    if text in TRUE_TOKENS:
        return True
    if text in FALSE_TOKENS:
        return False
    return None
