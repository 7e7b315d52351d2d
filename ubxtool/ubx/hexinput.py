"""Normalization of pasted hex text.

Hex dumps copied from terminals, u-center or logic analyzers come in many
shapes::

    B5 62 01 07 ...
    0xB5, 0x62, 0x01, 0x07, ...
    B5:62:01:07:...
    B5h 62h 01h 07h ...

All of them reduce to the same uppercase digit string.
"""

import re

# Whitespace, commas and colons, plus the literal "0x" prefix and "h" suffix.
_NOISE_PATTERN = re.compile(r"0x|[\s,:h]", re.IGNORECASE)
_HEX_PATTERN = re.compile(r"[0-9A-F]*")


def clean_hex_string(text: str) -> str:
    """Strip separators and hex prefixes/suffixes and uppercase the rest.

    Example:
        >>> clean_hex_string("0xb5, 0x62")
        'B562'
        >>> clean_hex_string("b5h:62h")
        'B562'
    """
    return _NOISE_PATTERN.sub("", text).upper()


def hex_to_bytes(hex_text: str) -> bytes | None:
    """Convert normalized hex text to bytes.

    Args:
        hex_text: Output of ``clean_hex_string``.

    Returns:
        Decoded bytes, or None if the text has odd length or contains
        non-hex characters.
    """
    if len(hex_text) % 2 != 0:
        return None
    if _HEX_PATTERN.fullmatch(hex_text) is None:
        return None
    return bytes.fromhex(hex_text)
