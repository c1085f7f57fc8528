"""Sequence generator: a counter rendered through a numeral alphabet.

The generator owns a non-negative counter, an alphabet and a minimum
display length. Navigation (advance, retreat, jump) only touches the
counter; the alphabet and minimum length only affect how it is rendered,
so they can be changed mid-sequence without losing position.

    gen = SequenceGenerator("abc")
    gen.take()       -> "a"
    gen.take()       -> "b"
    gen.jump_to(12)
    gen.current()    -> "bba"
"""
from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass

from lightid.core.numeral import (
    DEFAULT_ALPHABET,
    Alphabet,
    AlphabetLike,
    decode,
    encode,
    encoded_length,
)

logger = logging.getLogger(__name__)

ENV_ALPHABET = "LIGHT_ID_ALPHABET"
ENV_MIN_LENGTH = "LIGHT_ID_MIN_LENGTH"


@dataclass
class GeneratorConfig:
    """Rendering configuration for a SequenceGenerator."""
    alphabet: str = DEFAULT_ALPHABET
    min_length: int = 0

    @classmethod
    def from_env(cls, environ=None) -> GeneratorConfig:
        """Read LIGHT_ID_ALPHABET / LIGHT_ID_MIN_LENGTH, falling back to defaults."""
        environ = os.environ if environ is None else environ
        alphabet = environ.get(ENV_ALPHABET) or DEFAULT_ALPHABET
        raw_min = environ.get(ENV_MIN_LENGTH, "0")
        try:
            min_length = int(raw_min)
        except ValueError:
            raise ValueError(f"{ENV_MIN_LENGTH} must be an integer, got {raw_min!r}") from None
        return cls(alphabet=alphabet, min_length=min_length)


def _check_step(by: int) -> None:
    if by < 0:
        raise ValueError(f"Step must be non-negative, got {by}")


class SequenceGenerator:
    """Stateful identifier generator over a custom alphabet.

    Equality compares position and alphabet; ordering compares position only,
    so two generators over different alphabets can be ordered but not equal.
    Mutating methods return the generator so calls can be chained.
    """

    def __init__(self, alphabet: AlphabetLike = DEFAULT_ALPHABET,
                 min_length: int = 0, count: int = 0):
        self._alphabet = Alphabet.of(alphabet)
        self._min_length = 0
        self._count = 0
        self.set_min_length(min_length)
        self.jump_to(count)

    @classmethod
    def from_config(cls, config: GeneratorConfig, count: int = 0) -> SequenceGenerator:
        return cls(config.alphabet, config.min_length, count)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def count(self) -> int:
        """Ordinal position of the current identifier."""
        return self._count

    def set_alphabet(self, alphabet: AlphabetLike) -> SequenceGenerator:
        """Render the same counter in a new alphabet from now on."""
        self._alphabet = Alphabet.of(alphabet)
        logger.debug("alphabet set to base %d at count %d",
                     self._alphabet.base, self._count)
        return self

    def set_min_length(self, min_length: int) -> SequenceGenerator:
        if min_length < 0:
            raise ValueError(f"Minimum length must be non-negative, got {min_length}")
        self._min_length = min_length
        return self

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def advance(self, by: int = 1) -> SequenceGenerator:
        _check_step(by)
        self._count += by
        return self

    def retreat(self, by: int = 1) -> SequenceGenerator:
        """Move back `by` positions, stopping at zero."""
        _check_step(by)
        self._count = max(0, self._count - by)
        return self

    def jump_to(self, count: int) -> SequenceGenerator:
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")
        logger.debug("jump %d -> %d", self._count, count)
        self._count = count
        return self

    def jump_to_text(self, text: str) -> SequenceGenerator:
        """Resume from a previously issued identifier."""
        return self.jump_to(decode(text, self._alphabet))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def current(self) -> str:
        return encode(self._count, self._alphabet, self._min_length)

    def take(self) -> str:
        """Return the current identifier and move to the next one."""
        value = self.current()
        self._count += 1
        return value

    def nth(self, n: int) -> str:
        """Identifier at ordinal n, leaving the counter alone."""
        return encode(n, self._alphabet, self._min_length)

    def index(self, text: str) -> int:
        """Ordinal of an identifier, leaving the counter alone."""
        return decode(text, self._alphabet)

    def __len__(self) -> int:
        return encoded_length(self._count, self._alphabet, self._min_length)

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.take()

    # ------------------------------------------------------------------
    # Copying and comparison
    # ------------------------------------------------------------------

    def copy(self) -> SequenceGenerator:
        return copy.copy(self)

    def __copy__(self) -> SequenceGenerator:
        return type(self)(self._alphabet, self._min_length, self._count)

    def __eq__(self, other):
        if not isinstance(other, SequenceGenerator):
            return NotImplemented
        return self._count == other._count and self._alphabet == other._alphabet

    def __lt__(self, other):
        if not isinstance(other, SequenceGenerator):
            return NotImplemented
        return self._count < other._count

    def __le__(self, other):
        if not isinstance(other, SequenceGenerator):
            return NotImplemented
        return self._count <= other._count

    def __gt__(self, other):
        if not isinstance(other, SequenceGenerator):
            return NotImplemented
        return self._count > other._count

    def __ge__(self, other):
        if not isinstance(other, SequenceGenerator):
            return NotImplemented
        return self._count >= other._count

    __hash__ = None

    def __repr__(self) -> str:
        return (f"SequenceGenerator(alphabet={str(self._alphabet)!r}, "
                f"min_length={self._min_length}, count={self._count})")
