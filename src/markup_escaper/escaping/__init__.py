"""Escaping layer for markup escaper.

This module provides the scan-and-replace engine and the named escaping
functions built on it.
"""

from .api import (
    ATTRIBUTE_ESCAPER,
    TEXT_ESCAPER,
    UTF8_ESCAPER,
    XML_ESCAPER,
    encode_xml,
    escape,
    escape_attribute,
    escape_text,
    escape_utf8,
)
from .engine import EscapeError, Escaper, get_escaper

__all__ = [
    # Named escaping functions
    "encode_xml",
    "escape",
    "escape_utf8",
    "escape_attribute",
    "escape_text",
    # Shared escaper instances
    "XML_ESCAPER",
    "UTF8_ESCAPER",
    "ATTRIBUTE_ESCAPER",
    "TEXT_ESCAPER",
    # Engine
    "Escaper",
    "EscapeError",
    "get_escaper",
]
