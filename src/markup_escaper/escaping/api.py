"""Named escaping functions for XML and HTML output.

These are the module-level entry points most callers want. Each wraps a
shared Escaper built from one of the EscaperConfig presets.
"""

from markup_escaper.escaping.engine import Escaper
from markup_escaper.shared.config import EscaperConfig

XML_ESCAPER = Escaper(EscaperConfig.create_preset("xml"))
UTF8_ESCAPER = Escaper(EscaperConfig.create_preset("utf8"))
ATTRIBUTE_ESCAPER = Escaper(EscaperConfig.create_preset("attribute"))
TEXT_ESCAPER = Escaper(EscaperConfig.create_preset("text"))


def encode_xml(text: str) -> str:
    """Encode all non-ASCII characters and XML special characters.

    ``"``, ``&``, ``'``, ``<`` and ``>`` become named entities. Every other
    character from U+0080 up becomes a numeric hexadecimal reference, so the
    output is pure ASCII and survives any transport encoding.

    Args:
        text: Text to encode

    Returns:
        Encoded text

    Examples:
        >>> encode_xml("<a>")
        '&lt;a&gt;'
        >>> encode_xml("\\u00fcber")
        '&#xfc;ber'
    """
    return XML_ESCAPER.escape(text)


escape = encode_xml


def escape_utf8(text: str) -> str:
    """Escape only the characters that are special in XML.

    Non-ASCII characters are left as they are, so the output is shorter than
    ``encode_xml`` but depends on the document's character encoding.

    Examples:
        >>> escape_utf8("<\\u00fc>") == "&lt;\\u00fc&gt;"
        True
    """
    return UTF8_ESCAPER.escape(text)


def escape_attribute(text: str) -> str:
    """Escape text for a double-quoted HTML attribute value.

    Follows the HTML serialization algorithm: ``&``, ``"`` and U+00A0 are
    replaced; apostrophes and angle brackets are kept.
    """
    return ATTRIBUTE_ESCAPER.escape(text)


def escape_text(text: str) -> str:
    """Escape text for HTML element content.

    ``&``, ``<``, ``>`` and U+00A0 are replaced; quotes are kept.
    """
    return TEXT_ESCAPER.escape(text)
