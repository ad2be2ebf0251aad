"""
Static character-class tables.

Each table is an ordered, immutable tuple of single characters. The
generator concatenates the enabled tables in the order of ``CHARSETS``.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Mapping, Tuple

CharsetList = Tuple[str, ...]

LOWERCASE: CharsetList = tuple(string.ascii_lowercase)
UPPERCASE: CharsetList = tuple(string.ascii_uppercase)
NUMBERS: CharsetList = tuple(string.digits)
SPECIAL: CharsetList = tuple(string.punctuation)

# Latin-1 supplement, printable range only (no soft hyphen).
EXTENDED: CharsetList = tuple(
    chr(code) for code in range(0xA1, 0x100) if code != 0xAD
)

# Class name -> table, in generation order.
CHARSETS: Mapping[str, CharsetList] = MappingProxyType(
    {
        "lowercase": LOWERCASE,
        "uppercase": UPPERCASE,
        "numbers": NUMBERS,
        "special": SPECIAL,
        "extended": EXTENDED,
    }
)

CHARSET_NAMES: Tuple[str, ...] = tuple(CHARSETS)
