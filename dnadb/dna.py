"""DNA records, probing policies and the default sequence hash."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MIN_PRIME = 101
MAX_PRIME = 99991
MIN_LOC_ID = 100000
MAX_LOC_ID = 999999
ALPHABET = "ACGT"

_MASK = 0xFFFFFFFF


class ProbePolicy(enum.Enum):
    """Collision handling policy of a hash table."""

    QUADRATIC = "quadratic"
    DOUBLEHASH = "doublehash"
    LINEAR = "linear"


DEFAULT_POLICY = ProbePolicy.QUADRATIC


def hash_code(text: str) -> int:
    """Return the unsigned 32-bit multiply-by-33 hash of ``text``.

    Bytes are taken from the UTF-8 encoding and treated as signed chars.
    """
    value = 0
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _MASK
    return value


@dataclass(eq=False)
class DNA:
    """A DNA sequence found at a location; identity is sequence plus location."""

    sequence: str = ""
    location: int = 0
    used: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DNA):
            return NotImplemented
        return self.sequence == other.sequence and self.location == other.location

    def __str__(self) -> str:
        if not self.sequence:
            return ""
        return f"{self.sequence} ({self.location}, {int(self.used)})"