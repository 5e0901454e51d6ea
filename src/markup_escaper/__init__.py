"""Markup Escaper.

Character-level escaping of text for XML and HTML output. Characters that
are unsafe in the target context are replaced by named entities or numeric
character references; everything else passes through untouched.

Progressive API Disclosure:
- Level 1: Named functions - encode_xml(), escape_utf8(), escape_attribute(), escape_text()
- Level 2: Escaper class with EscaperConfig presets and statistics
- Level 3: Custom escapers - get_escaper() with your own trigger pattern and table
"""

__version__ = "0.1.0"
__author__ = "Markup Escaper Team"

# Progressive API disclosure - Level 1: Named functions
from .escaping import (
    encode_xml,
    escape,
    escape_attribute,
    escape_text,
    escape_utf8,
)

# Progressive API disclosure - Level 2 and 3: Engine and configuration
from .escaping import EscapeError, Escaper, get_escaper
from .shared.config import ConfigError, ConfigValidationError, EscaperConfig
from .shared.result import EscapeResult, EscapeStatistics

# Raw trigger pattern and table of the general encoder
from .character import XML_CODE_MAP, XML_REPLACER, get_code_point

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Named escaping functions
    "encode_xml",
    "escape",
    "escape_utf8",
    "escape_attribute",
    "escape_text",

    # Level 2: Engine and configuration
    "Escaper",
    "EscaperConfig",
    "EscapeResult",
    "EscapeStatistics",

    # Level 3: Building blocks for custom escapers
    "get_escaper",
    "get_code_point",
    "XML_REPLACER",
    "XML_CODE_MAP",

    # Exceptions
    "EscapeError",
    "ConfigError",
    "ConfigValidationError",
]
