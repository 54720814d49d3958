"""
Exception types raised by the cipher core and its configuration loader.
"""


class CipherError(ValueError):
    """Base class for every configuration failure of the cipher."""


class RangeError(CipherError):
    """A numeric parameter lies outside the bounds declared next to it."""


class FormatError(CipherError):
    """A plugboard entry is malformed."""


class CollisionError(CipherError):
    """Two plugboard keys target the same value."""


class DuplicateKeyError(CollisionError):
    """A plugboard key is declared more than once."""


class ConfigurationError(CipherError):
    """The configuration document is missing elements or holds bad numbers."""


class PreconditionError(RuntimeError):
    """encrypt/decrypt called on an engine that was never configured."""
