"""Trigger sets and replacement tables for the built-in escapers.

Each escaper pairs a compiled character class (the characters that must be
escaped) with a read-only table mapping code points to their entity. Every
table key is matched by its trigger pattern. Replacement strings are plain
ASCII entities and never need escaping themselves.
"""

import re
from types import MappingProxyType
from typing import Mapping

QUOTATION_MARK = 0x22
AMPERSAND = 0x26
APOSTROPHE = 0x27
LESS_THAN = 0x3C
GREATER_THAN = 0x3E
NO_BREAK_SPACE = 0xA0

# First code point outside ASCII; everything from here up is escaped by encode_xml
NON_ASCII_START = 0x80

XML_REPLACER = re.compile(r"[\"&'<>\x80-\U0010FFFF]")

XML_CODE_MAP: Mapping[int, str] = MappingProxyType({
    QUOTATION_MARK: "&quot;",
    AMPERSAND: "&amp;",
    APOSTROPHE: "&apos;",
    LESS_THAN: "&lt;",
    GREATER_THAN: "&gt;",
})

UTF8_REPLACER = re.compile(r"[&<>'\"]")

# https://html.spec.whatwg.org/multipage/parsing.html#escapingString
ATTRIBUTE_REPLACER = re.compile(r"[\"&\u00A0]")

ATTRIBUTE_CODE_MAP: Mapping[int, str] = MappingProxyType({
    QUOTATION_MARK: "&quot;",
    AMPERSAND: "&amp;",
    NO_BREAK_SPACE: "&nbsp;",
})

TEXT_REPLACER = re.compile(r"[&<>\u00A0]")

TEXT_CODE_MAP: Mapping[int, str] = MappingProxyType({
    AMPERSAND: "&amp;",
    LESS_THAN: "&lt;",
    GREATER_THAN: "&gt;",
    NO_BREAK_SPACE: "&nbsp;",
})
