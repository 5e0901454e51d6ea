"""Code point decoding with UTF-16 surrogate pair support.

Python strings normally hold one code point per index, so astral characters
such as U+1F600 arrive as a single unit and decode with ``ord``. Text that was
decoded with ``surrogatepass`` (or built from UTF-16 code units by hand)
carries the pair as two separate surrogate code points instead; those are
combined here so numeric references name the real character.
"""

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
SURROGATE_MULTIPLIER = 0x400
SUPPLEMENTARY_PLANE_START = 0x10000


def is_high_surrogate(char_code: int) -> bool:
    """Check if a code unit is a UTF-16 high (leading) surrogate."""
    return HIGH_SURROGATE_START <= char_code <= HIGH_SURROGATE_END


def is_low_surrogate(char_code: int) -> bool:
    """Check if a code unit is a UTF-16 low (trailing) surrogate."""
    return LOW_SURROGATE_START <= char_code <= LOW_SURROGATE_END


def get_code_point(text: str, index: int) -> int:
    """Return the code point starting at ``index``.

    A high surrogate is combined with whatever unit follows it, without
    checking that the follower is a low surrogate. Malformed input therefore
    yields an out-of-place value instead of an error. A high surrogate at the
    end of the text is returned unchanged.

    Args:
        text: Text to read from
        index: Zero-based index of the first unit

    Returns:
        The decoded code point

    Examples:
        >>> get_code_point("a\\ud83d\\ude00", 1)
        128512
        >>> get_code_point("\\U0001F600", 0)
        128512
    """
    char_code = ord(text[index])

    if is_high_surrogate(char_code) and index + 1 < len(text):
        return (
            (char_code - HIGH_SURROGATE_START) * SURROGATE_MULTIPLIER
            + ord(text[index + 1])
            - LOW_SURROGATE_START
            + SUPPLEMENTARY_PLANE_START
        )

    return char_code
