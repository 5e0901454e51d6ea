"""Configuration classes for markup escaping.

An ``EscaperConfig`` pairs a trigger pattern with a replacement table and
decides whether unmatched triggers fall back to numeric character references.
Configurations are frozen and validated on construction so a running escaper
can never meet a character it has no replacement for.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from markup_escaper.character.tables import (
    ATTRIBUTE_CODE_MAP,
    ATTRIBUTE_REPLACER,
    TEXT_CODE_MAP,
    TEXT_REPLACER,
    UTF8_REPLACER,
    XML_CODE_MAP,
    XML_REPLACER,
)

# Replacements must be entity or character references built from ASCII
ENTITY_PATTERN = re.compile(r"&(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#x[0-9A-Fa-f]+);")

# Table coverage is sampled over Basic Latin and Latin-1 Supplement
COVERAGE_SAMPLE_END = 0x100

PRESET_NAMES = ("xml", "utf8", "attribute", "text")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class EscaperConfig:
    """Trigger pattern and replacement table for one escaper.

    Attributes:
        trigger: Character class matching every character to escape. A string
            is compiled on construction.
        table: Mapping from code point to replacement entity. Stored read-only.
        numeric_fallback: Emit ``&#x..;`` for triggers missing from the table.
            When False every trigger must have a table entry.
        name: Label used in logs and results
    """

    trigger: Union[str, "re.Pattern[str]"]
    table: Mapping[int, str]
    numeric_fallback: bool = False
    name: str = "custom"

    def __post_init__(self) -> None:
        """Compile, freeze and validate the configuration."""
        trigger = self.trigger
        if isinstance(trigger, str):
            try:
                trigger = re.compile(trigger)
            except re.error as e:
                raise ConfigValidationError(
                    f"Invalid trigger pattern: {e}",
                    field_name="trigger",
                ) from e
        if not isinstance(trigger, re.Pattern) or not isinstance(trigger.pattern, str):
            raise ConfigValidationError(
                "trigger must be a str pattern or a compiled str regular expression",
                field_name="trigger",
                suggestions=["Pass re.compile(r'[&<>]') or the pattern text itself"],
            )
        object.__setattr__(self, "trigger", trigger)
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))

        self._validate_table()
        self._validate_match_width()
        if not self.numeric_fallback:
            self._validate_coverage()

    def __hash__(self) -> int:
        return hash((
            self.trigger,
            frozenset(self.table.items()),
            self.numeric_fallback,
            self.name,
        ))

    def _validate_match_width(self) -> None:
        # Scans advance one unit per match
        if self.trigger.fullmatch(""):
            raise ConfigValidationError(
                "Trigger pattern matches the empty string",
                field_name="trigger",
                suggestions=["Use a single character class such as r'[&<>]'"],
            )
        for char_code in self.table:
            doubled = chr(char_code) * 2
            if self.trigger.fullmatch(doubled):
                raise ConfigValidationError(
                    f"Trigger pattern matches {doubled!r}; every match must be "
                    "exactly one character",
                    field_name="trigger",
                    suggestions=["Drop repetition operators such as '+' or '*'"],
                )

    def _validate_table(self) -> None:
        for char_code, replacement in self.table.items():
            if not isinstance(char_code, int) or isinstance(char_code, bool):
                suggestions = []
                if isinstance(char_code, str) and len(char_code) == 1:
                    suggestions.append(f"Use ord({char_code!r}) as the key")
                raise ConfigValidationError(
                    f"Table keys must be integer code points, got {char_code!r}",
                    field_name="table",
                    suggestions=suggestions,
                )
            if not 0 <= char_code <= 0x10FFFF:
                raise ConfigValidationError(
                    f"Table key {char_code:#x} is outside the Unicode range",
                    field_name="table",
                )
            if not self.trigger.fullmatch(chr(char_code)):
                raise ConfigValidationError(
                    f"Table key U+{char_code:04X} is not matched by the trigger "
                    "pattern and would never be replaced",
                    field_name="trigger",
                    suggestions=[f"Add {chr(char_code)!r} to the trigger character class"],
                )
            if not isinstance(replacement, str) or not ENTITY_PATTERN.fullmatch(replacement):
                raise ConfigValidationError(
                    f"Replacement for U+{char_code:04X} must be an ASCII entity or "
                    f"character reference, got {replacement!r}",
                    field_name="table",
                    suggestions=["Use a form like '&amp;', '&#38;' or '&#x26;'"],
                )

    def _validate_coverage(self) -> None:
        missing = [
            char_code for char_code in range(COVERAGE_SAMPLE_END)
            if char_code not in self.table and self.trigger.fullmatch(chr(char_code))
        ]
        if missing:
            listed = ", ".join(f"U+{char_code:04X}" for char_code in missing[:5])
            raise ConfigValidationError(
                f"Trigger matches characters without a table entry: {listed}",
                field_name="table",
                suggestions=[
                    "Add table entries for these characters",
                    "Enable numeric_fallback to emit numeric character references",
                ],
            )

    @classmethod
    def create_preset(cls, preset: str) -> "EscaperConfig":
        """Create one of the built-in configurations.

        Args:
            preset: Preset name ('xml', 'utf8', 'attribute', 'text')

        Returns:
            Configured EscaperConfig instance
        """
        if preset == "xml":
            return cls(
                trigger=XML_REPLACER,
                table=XML_CODE_MAP,
                numeric_fallback=True,
                name="xml",
            )
        if preset == "utf8":
            return cls(trigger=UTF8_REPLACER, table=XML_CODE_MAP, name="utf8")
        if preset == "attribute":
            return cls(
                trigger=ATTRIBUTE_REPLACER,
                table=ATTRIBUTE_CODE_MAP,
                name="attribute",
            )
        if preset == "text":
            return cls(trigger=TEXT_REPLACER, table=TEXT_CODE_MAP, name="text")
        raise ValueError(f"Unknown preset: {preset} (expected one of {PRESET_NAMES})")
