"""
Caesar-Enigma: a positional shift cipher over a configurable alphabet
followed by a plugboard substitution.

The shift applied to the character at position i is key + i * increment,
taken modulo the alphabet length. Educational only.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from alphabet import CharClass, build_alphabet
from errors import PreconditionError, RangeError
from plugboard import Plugboard, parse_plugboard


@dataclass(frozen=True)
class CipherSettings:
    """One validated configuration. Replaced wholesale by configure()."""
    alphabet: str
    encryption_key: int
    increment_factor: int
    plugboard: Plugboard = field(default_factory=Plugboard)
    index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "index", {ch: i for i, ch in enumerate(self.alphabet)})


def _check_range(name: str, value: int, lower: int, upper: int) -> None:
    if value < lower or value > upper:
        raise RangeError(f"{name} must be between {lower} and {upper}, got {value}")


class CaesarEnigma:
    def __init__(self):
        self._settings: Optional[CipherSettings] = None

    @property
    def configured(self) -> bool:
        return self._settings is not None

    @property
    def settings(self) -> CipherSettings:
        if self._settings is None:
            raise PreconditionError("Cipher has not been configured")
        return self._settings

    def configure(self, flags: Iterable[CharClass], key: int, key_min: int, key_max: int,
                  increment: int, increment_min: int, increment_max: int,
                  plugboard_spec: str) -> None:
        """Validate every parameter, then install them together.

        The bounds are the ones declared alongside each value in the
        configuration; no other limit is applied. On failure the previous
        configuration stays in place.
        """
        alphabet = build_alphabet(flags)
        _check_range("Encryption key", key, key_min, key_max)
        _check_range("Increment factor", increment, increment_min, increment_max)
        plugboard = parse_plugboard(plugboard_spec)
        self._settings = CipherSettings(alphabet, key, increment, plugboard)

    def encrypt(self, cleartext: str) -> str:
        s = self.settings
        size = len(s.alphabet)
        out = []
        for i, c in enumerate(cleartext):
            idx = s.index.get(c.upper())
            if idx is None:
                out.append(c)
                continue
            shifted = s.alphabet[(idx + s.encryption_key + i * s.increment_factor) % size]
            out.append(s.plugboard.forward(shifted))
        return "".join(out)

    def decrypt(self, ciphertext: str) -> str:
        # No case folding here: only exact alphabet members are shifted back.
        s = self.settings
        size = len(s.alphabet)
        out = []
        for i, c in enumerate(ciphertext):
            c = s.plugboard.reverse(c)
            idx = s.index.get(c)
            if idx is None:
                out.append(c)
                continue
            out.append(s.alphabet[(idx - s.encryption_key - i * s.increment_factor) % size])
        return "".join(out)

    def __repr__(self) -> str:
        if self._settings is None:
            return "CaesarEnigma(unconfigured)"
        s = self._settings
        return (f"CaesarEnigma(alphabet={s.alphabet!r}, key={s.encryption_key}, "
                f"increment={s.increment_factor}, plugboard={s.plugboard!r})")
