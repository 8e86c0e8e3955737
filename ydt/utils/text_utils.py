"""Text processing utilities."""

# CJK Unified Ideographs: Extension A, Basic, Compatibility, Extensions B-H
CJK_IDEOGRAPH_RANGES = (
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0x2CEB0, 0x2EBEF),
    (0x30000, 0x3134F),
    (0x31350, 0x323AF),
)


def is_cjk_ideograph(ch: str) -> bool:
    """Check if a single character is a CJK ideograph.

    Args:
        ch: A single character

    Returns:
        True if the code point falls in one of the ideograph ranges
    """
    code = ord(ch)
    return any(start <= code <= end for start, end in CJK_IDEOGRAPH_RANGES)


def contains_cjk_ideograph(text: str) -> bool:
    """Check if text contains at least one CJK ideograph.

    Args:
        text: Text to check

    Returns:
        True if any character is a CJK ideograph
    """
    return any(is_cjk_ideograph(ch) for ch in text)


def flatten_text(element, strip: bool = False) -> str:
    """Concatenate all text nodes below an element."""
    text = element.get_text()
    return text.strip() if strip else text
