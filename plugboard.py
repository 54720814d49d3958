"""
Plugboard: a partial character substitution applied after the shift on
encryption and undone before it on decryption.

Text format: one wrapper character on each side around a comma separated
list of `K:V` entries whose sides are 3 characters wide, e.g.
`{'A':'B', 'B':'A'}`. Only the middle character of each side is used.
"""
import re
from typing import Dict, Iterable, Tuple

from errors import CollisionError, DuplicateKeyError, FormatError

_ENTRY_SEPARATOR = re.compile(r",\s*")
_PAIR_SEPARATOR = re.compile(r":\s*")
SIDE_WIDTH = 3


class Plugboard:
    """Immutable partial mapping. Characters without an entry pass through."""

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()):
        forward: Dict[str, str] = {}
        reverse: Dict[str, str] = {}
        for key, value in pairs:
            if value in reverse and reverse[value] != key:
                raise CollisionError(f"Collision detected in plugboard mapping for character: {value}")
            if key in forward:
                raise DuplicateKeyError(f"Multiple mappings for original character: {key}")
            forward[key] = value
            reverse[value] = key
        self._forward = forward
        self._reverse = reverse

    def forward(self, c: str) -> str:
        return self._forward.get(c, c)

    def reverse(self, c: str) -> str:
        return self._reverse.get(c, c)

    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._forward.items())

    def __len__(self) -> int:
        return len(self._forward)

    def __eq__(self, other):
        if not isinstance(other, Plugboard):
            return NotImplemented
        return self._forward == other._forward

    def __repr__(self) -> str:
        swaps = [f"{k}>{v}" for k, v in self._forward.items()]
        return f"<Plugboard {' '.join(swaps)}>"


def _parse_entry(entry: str) -> Tuple[str, str]:
    sides = _PAIR_SEPARATOR.split(entry)
    if len(sides) != 2 or any(len(side) != SIDE_WIDTH for side in sides):
        raise FormatError(f"Invalid plugboard entry: {entry}")
    return sides[0][1], sides[1][1]


def parse_plugboard(text: str) -> Plugboard:
    """Parse the textual plugboard into a new Plugboard.

    Raises:
        FormatError: the text has no wrapper or an entry is malformed.
        CollisionError: two keys share a value, or a key is repeated.
    """
    text = text.strip()
    if len(text) < 2:
        raise FormatError(f"Invalid plugboard: {text!r}")
    body = text[1:-1].strip()
    if not body:
        return Plugboard()

    entries = _ENTRY_SEPARATOR.split(body)
    # a trailing comma leaves empty entries behind
    while entries and not entries[-1]:
        entries.pop()
    return Plugboard(_parse_entry(entry) for entry in entries)
