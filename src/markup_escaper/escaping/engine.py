"""Scan-and-replace escaping engine.

One left-to-right pass over the input finds the next trigger character at or
after the cursor, copies the untouched run before it, and appends the
replacement. Two scan variants share that loop:

- with numeric fallback, triggers missing from the table become hexadecimal
  character references (``&#xfc;``) and surrogate pairs are consumed whole;
- table-only, every trigger is a single unit with a table entry.

The compiled pattern and the table are read-only and shared; the cursor lives
in local variables, so one Escaper can serve any number of threads.
"""

import re
from typing import Callable, List, Mapping, Optional, Union

from markup_escaper.character.codepoint import (
    get_code_point,
    is_high_surrogate,
    is_low_surrogate,
)
from markup_escaper.shared.config import EscaperConfig
from markup_escaper.shared.logging import get_logger
from markup_escaper.shared.result import EscapeResult, EscapeStatistics

NUMERIC_REFERENCE_FORMAT = "&#x{:x};"


class EscapeError(Exception):
    """Raised when a trigger match cannot be replaced."""

    def __init__(self, message: str, char_code: Optional[int] = None,
                 position: Optional[int] = None):
        super().__init__(message)
        self.char_code = char_code
        self.position = position


class Escaper:
    """Escapes text according to an EscaperConfig."""

    def __init__(
        self,
        config: EscaperConfig,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize escaper with configuration.

        Args:
            config: Trigger pattern, table and fallback mode
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config
        self.logger = get_logger(__name__, correlation_id, config.name)
        self._search = config.trigger.search
        self._table = config.table
        self._scan = (
            self._scan_with_fallback if config.numeric_fallback
            else self._scan_table_only
        )

        if self.logger.is_debug_enabled():
            self.logger.debug(
                "Escaper configured",
                extra={
                    "trigger": config.trigger.pattern,
                    "table_size": len(config.table),
                    "numeric_fallback": config.numeric_fallback,
                }
            )

    @property
    def name(self) -> str:
        """Name of the underlying configuration."""
        return self.config.name

    def __call__(self, text: str) -> str:
        return self.escape(text)

    def __repr__(self) -> str:
        return f"Escaper(name={self.name!r}, numeric_fallback={self.config.numeric_fallback})"

    def escape(self, text: str) -> str:
        """Escape text and return the result string."""
        self._check_input(text)
        return self._scan(text, None)

    def escape_with_result(self, text: str) -> EscapeResult:
        """Escape text and report what was replaced.

        Args:
            text: Text to escape

        Returns:
            EscapeResult with escaped text and scan statistics
        """
        self._check_input(text)
        statistics = EscapeStatistics(total_units=len(text))
        escaped = self._scan(text, statistics)
        return EscapeResult(text=escaped, statistics=statistics, escaper=self.name)

    def _check_input(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(
                f"{self.name} escaper expects str, got {type(text).__name__}"
            )

    def _scan_with_fallback(
        self, text: str, statistics: Optional[EscapeStatistics]
    ) -> str:
        parts: List[str] = []
        last_index = 0
        match = self._search(text)

        while match is not None:
            index = self._match_index(match)
            char_code = ord(text[index])
            replacement = self._table.get(char_code)
            parts.append(text[last_index:index])

            if replacement is not None:
                parts.append(replacement)
                last_index = index + 1
                if statistics is not None:
                    statistics.named_replacements += 1
            else:
                parts.append(NUMERIC_REFERENCE_FORMAT.format(get_code_point(text, index)))
                last_index = index + 1
                if is_high_surrogate(char_code) and last_index < len(text):
                    self._note_surrogate_pair(text, index, statistics)
                    last_index += 1
                if statistics is not None:
                    statistics.numeric_references += 1

            match = self._search(text, last_index)

        if not parts:
            return text
        parts.append(text[last_index:])
        return "".join(parts)

    def _scan_table_only(
        self, text: str, statistics: Optional[EscapeStatistics]
    ) -> str:
        parts: List[str] = []
        last_index = 0
        replaced = 0

        for match in self.config.trigger.finditer(text):
            index = self._match_index(match)
            char_code = ord(text[index])
            replacement = self._table.get(char_code)
            if replacement is None:
                raise EscapeError(
                    f"No replacement for U+{char_code:04X} in {self.name} escaper",
                    char_code=char_code,
                    position=index,
                )

            if last_index != index:
                parts.append(text[last_index:index])
            parts.append(replacement)
            last_index = index + 1
            replaced += 1

        if statistics is not None:
            statistics.named_replacements = replaced

        if not parts:
            return text
        parts.append(text[last_index:])
        return "".join(parts)

    def _match_index(self, match: "re.Match[str]") -> int:
        """Return the start of a match, which must cover exactly one unit."""
        index = match.start()
        if match.end() - index != 1:
            raise EscapeError(
                f"Trigger of {self.name} escaper matched {match.group()!r} at "
                f"{index}; every match must be exactly one character",
                position=index,
            )
        return index

    def _note_surrogate_pair(
        self, text: str, index: int, statistics: Optional[EscapeStatistics]
    ) -> None:
        follower = ord(text[index + 1])
        if statistics is not None:
            statistics.surrogate_pairs += 1
        if not is_low_surrogate(follower):
            if statistics is not None:
                statistics.lenient_surrogates += 1
            self.logger.warning(
                "High surrogate followed by a non-low-surrogate unit; "
                "combined leniently",
                extra={
                    "position": index,
                    "high": f"U+{ord(text[index]):04X}",
                    "follower": f"U+{follower:04X}",
                }
            )


def get_escaper(
    trigger: Union[str, "re.Pattern[str]"],
    table: Mapping[int, str],
    name: str = "custom"
) -> Callable[[str], str]:
    """Build a table-only escape function for a custom character set.

    Every character the trigger matches must have an entry in the table;
    this is checked when the escaper is built.

    Args:
        trigger: Character class of the characters to escape
        table: Mapping from code point to replacement entity
        name: Label used in logs and error messages

    Returns:
        A function taking text and returning the escaped text

    Raises:
        ConfigValidationError: If the trigger and table do not agree

    Examples:
        >>> escape_lt = get_escaper(r"[<]", {0x3C: "&lt;"})
        >>> escape_lt("a<b")
        'a&lt;b'
    """
    config = EscaperConfig(trigger=trigger, table=table, name=name)
    return Escaper(config).escape
