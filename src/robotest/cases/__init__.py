"""Test-case loading."""

from .booleans import parse_lenient_bool
from .loader import HEADER_MODES, load_cases

__all__ = [
    "HEADER_MODES",
    "load_cases",
    "parse_lenient_bool",
]
