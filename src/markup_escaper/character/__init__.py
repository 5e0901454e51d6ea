"""Character layer for markup escaper.

This module provides code point decoding and the trigger patterns and
replacement tables used by the built-in escapers.
"""

from .codepoint import (
    get_code_point,
    is_high_surrogate,
    is_low_surrogate,
)
from .tables import (
    ATTRIBUTE_CODE_MAP,
    ATTRIBUTE_REPLACER,
    TEXT_CODE_MAP,
    TEXT_REPLACER,
    UTF8_REPLACER,
    XML_CODE_MAP,
    XML_REPLACER,
)

__all__ = [
    # Modules
    "codepoint",
    "tables",
    # Code point decoding
    "get_code_point",
    "is_high_surrogate",
    "is_low_surrogate",
    # Trigger patterns and tables
    "XML_REPLACER",
    "XML_CODE_MAP",
    "UTF8_REPLACER",
    "ATTRIBUTE_REPLACER",
    "ATTRIBUTE_CODE_MAP",
    "TEXT_REPLACER",
    "TEXT_CODE_MAP",
]
