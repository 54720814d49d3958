"""Alphabet construction from named character classes."""
import string
from enum import Enum
from typing import Iterable


class CharClass(Enum):
    """Character blocks that can be enabled in the working alphabet.

    Member order is the order in which the blocks are concatenated.
    """
    UPPER = string.ascii_uppercase
    DIGITS = string.digits
    PUNCTUATION = string.punctuation


def build_alphabet(flags: Iterable[CharClass]) -> str:
    enabled = set(flags)
    return "".join(cls.value for cls in CharClass if cls in enabled)


def parse_char_classes(text: str) -> frozenset:
    """Return the classes whose name appears anywhere in `text`."""
    return frozenset(cls for cls in CharClass if cls.name in text)
