"""
Loading cipher settings from an XML configuration file.

Expected document (element order is free, each element appears once):

    <configuration>
        <alphabet>UPPER DIGITS PUNCTUATION</alphabet>
        <encryption-key min-value="1" max-value="100">3</encryption-key>
        <increment-factor min-value="0" max-value="10">1</increment-factor>
        <plugboard>{'A':'B', 'B':'A'}</plugboard>
    </configuration>
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Union

from alphabet import CharClass, parse_char_classes
from caesar_enigma import CaesarEnigma
from errors import ConfigurationError

MIN_ATTR = "min-value"
MAX_ATTR = "max-value"


@dataclass(frozen=True)
class BoundedValue:
    value: int
    minimum: int
    maximum: int


@dataclass(frozen=True)
class CipherConfig:
    char_classes: FrozenSet[CharClass]
    encryption_key: BoundedValue
    increment_factor: BoundedValue
    plugboard: str

    def apply(self, engine: CaesarEnigma) -> CaesarEnigma:
        engine.configure(
            self.char_classes,
            self.encryption_key.value, self.encryption_key.minimum, self.encryption_key.maximum,
            self.increment_factor.value, self.increment_factor.minimum, self.increment_factor.maximum,
            self.plugboard,
        )
        return engine


def _single(root: ET.Element, tag: str, label: str) -> ET.Element:
    found = list(root.iter(tag))
    if len(found) != 1:
        raise ConfigurationError(f"Invalid {label} configuration.")
    return found[0]


def _to_int(raw, what: str) -> int:
    try:
        return int(raw.strip())
    except (AttributeError, ValueError) as exc:
        raise ConfigurationError(f"{what} is not an integer: {raw!r}") from exc


def _bounded(element: ET.Element) -> BoundedValue:
    return BoundedValue(
        value=_to_int(element.text, element.tag),
        minimum=_to_int(element.get(MIN_ATTR), f"{element.tag} {MIN_ATTR}"),
        maximum=_to_int(element.get(MAX_ATTR), f"{element.tag} {MAX_ATTR}"),
    )


def parse_cipher_config(document: Union[str, bytes]) -> CipherConfig:
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise ConfigurationError(f"Malformed configuration document: {exc}") from exc

    alphabet = _single(root, "alphabet", "alphabet")
    key = _single(root, "encryption-key", "encryption key")
    increment = _single(root, "increment-factor", "increment factor")
    plugboard = _single(root, "plugboard", "plugboard")

    return CipherConfig(
        char_classes=parse_char_classes((alphabet.text or "").strip()),
        encryption_key=_bounded(key),
        increment_factor=_bounded(increment),
        plugboard=(plugboard.text or "").strip(),
    )


def load_cipher_config(path: Union[str, Path]) -> CipherConfig:
    """Read and parse the configuration file at `path`.

    Raises FileNotFoundError when the file is missing and ConfigurationError
    when its structure is wrong.
    """
    return parse_cipher_config(Path(path).read_bytes())


def load_engine(path: Union[str, Path]) -> CaesarEnigma:
    return load_cipher_config(path).apply(CaesarEnigma())
