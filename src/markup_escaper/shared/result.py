"""Result objects for escaping operations.

The plain escaping functions return strings. ``Escaper.escape_with_result``
returns an ``EscapeResult`` carrying the same string plus counters describing
what the scan replaced.
"""

from dataclasses import dataclass, field


@dataclass
class EscapeStatistics:
    """Counters collected during one escaping scan."""

    total_units: int = 0
    named_replacements: int = 0
    numeric_references: int = 0
    surrogate_pairs: int = 0
    lenient_surrogates: int = 0  # high surrogates combined with a non-low follower

    def __post_init__(self) -> None:
        """Validate statistics."""
        if self.total_units < 0:
            raise ValueError("total_units must be >= 0")

    @property
    def replacements(self) -> int:
        """Total number of replacement strings emitted."""
        return self.named_replacements + self.numeric_references

    @property
    def replacement_rate(self) -> float:
        """Fraction of input units that started a replacement."""
        if self.total_units == 0:
            return 0.0
        return self.replacements / self.total_units


@dataclass
class EscapeResult:
    """Escaped text together with scan statistics.

    Attributes:
        text: Escaped text
        statistics: Counters gathered while scanning
        escaper: Name of the escaper configuration that produced the text
    """

    text: str
    statistics: EscapeStatistics = field(default_factory=EscapeStatistics)
    escaper: str = "custom"

    @property
    def changed(self) -> bool:
        """True when at least one character was replaced."""
        return self.statistics.replacements > 0
