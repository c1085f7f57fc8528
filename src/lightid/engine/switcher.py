"""Re-express identifiers from one alphabet in another.

Conversion goes through the count: decode in the source alphabet, encode
in the target alphabet. Leading zero digits decode away, so converting
there and back returns the original text unless that text carried padding
the return trip does not reproduce.
"""
from __future__ import annotations

from enum import Enum

from lightid.core.numeral import Alphabet, AlphabetLike, decode, encode


class Direction(Enum):
    FORWARD = "forward"   # source -> target
    REVERSE = "reverse"   # target -> source


class IdSwitcher:
    """Converts identifiers between a source and a target alphabet."""

    def __init__(self, source: AlphabetLike, target: AlphabetLike,
                 source_min_length: int = 0, target_min_length: int = 0):
        self.source = Alphabet.of(source)
        self.target = Alphabet.of(target)
        self.source_min_length = 0
        self.target_min_length = 0
        self.set_source_min_length(source_min_length)
        self.set_target_min_length(target_min_length)

    def set_source_min_length(self, n: int) -> IdSwitcher:
        """Padding applied to results of reverse conversions."""
        if n < 0:
            raise ValueError(f"Minimum length must be non-negative, got {n}")
        self.source_min_length = n
        return self

    def set_target_min_length(self, n: int) -> IdSwitcher:
        """Padding applied to results of forward conversions."""
        if n < 0:
            raise ValueError(f"Minimum length must be non-negative, got {n}")
        self.target_min_length = n
        return self

    def _sides(self, direction: Direction) -> tuple[Alphabet, Alphabet, int]:
        """(from alphabet, to alphabet, to min length) for a direction."""
        if direction is Direction.FORWARD:
            return self.source, self.target, self.target_min_length
        if direction is Direction.REVERSE:
            return self.target, self.source, self.source_min_length
        raise ValueError(f"Unknown direction: {direction!r}")

    def convert_count(self, count: int, direction: Direction = Direction.FORWARD) -> str:
        """Render a known count in the direction's output alphabet."""
        _, to_alphabet, min_length = self._sides(direction)
        return encode(count, to_alphabet, min_length)

    def convert(self, text: str, direction: Direction = Direction.FORWARD) -> str:
        from_alphabet, to_alphabet, min_length = self._sides(direction)
        return encode(decode(text, from_alphabet), to_alphabet, min_length)

    def forward(self, text: str) -> str:
        return self.convert(text, Direction.FORWARD)

    def reverse(self, text: str) -> str:
        return self.convert(text, Direction.REVERSE)

    def copy(self) -> IdSwitcher:
        return IdSwitcher(self.source, self.target,
                          self.source_min_length, self.target_min_length)

    def __repr__(self) -> str:
        return (f"IdSwitcher(source={str(self.source)!r}, target={str(self.target)!r}, "
                f"source_min_length={self.source_min_length}, "
                f"target_min_length={self.target_min_length})")
