"""Positional numeral encoding over caller-supplied alphabets.

A count (non-negative integer) is written most-significant digit first,
each digit being the alphabet symbol at that ordinal. Symbol 0 is the zero
digit and is also used for left padding, so padding never changes the
decoded value.

    encode(12, "abc")        -> "bba"
    encode(0, "abc", 4)      -> "aaaa"
    decode("bba", "abc")     -> 12
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

# 62 symbols, digits first
DEFAULT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class NumeralError(ValueError):
    """Base class for alphabet and decoding errors."""


class InvalidSymbolError(NumeralError):
    """A symbol was not found in the active alphabet."""

    def __init__(self, symbol: str, text: str | None = None):
        self.symbol = symbol
        self.text = text
        if text is None:
            msg = f"Invalid symbol {symbol!r}"
        else:
            msg = f"Invalid symbol {symbol!r} in {text!r}"
        super().__init__(msg)


class DegenerateAlphabetError(NumeralError):
    """Alphabet has fewer than two symbols."""


class DuplicateSymbolError(NumeralError):
    """Alphabet contains the same symbol more than once."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Duplicate symbol {symbol!r} in alphabet")


@dataclass(frozen=True, slots=True)
class Alphabet:
    """
    Immutable ordered set of digit symbols.

    The position of a symbol is its digit value; the number of symbols is
    the base. Validated on construction: at least two symbols, each a
    single character, no duplicates.
    """
    symbols: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        symbols = tuple(self.symbols)
        index: dict[str, int] = {}
        for i, s in enumerate(symbols):
            if not isinstance(s, str) or len(s) != 1:
                raise ValueError(f"Symbols must be single characters, got {s!r}")
            if s in index:
                raise DuplicateSymbolError(s)
            index[s] = i
        if len(symbols) < 2:
            raise DegenerateAlphabetError(
                f"Alphabet needs at least 2 symbols, got {len(symbols)}"
            )
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "_index", index)

    @classmethod
    def of(cls, value: AlphabetLike) -> Alphabet:
        """Coerce a string, a sequence of symbols, or an Alphabet."""
        if isinstance(value, Alphabet):
            return value
        return cls(tuple(value))

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> str:
        """The zero digit, also used for padding."""
        return self.symbols[0]

    def position(self, symbol: str) -> int:
        """Digit value of a symbol."""
        try:
            return self._index[symbol]
        except KeyError:
            raise InvalidSymbolError(symbol) from None

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __getitem__(self, i: int) -> str:
        return self.symbols[i]

    def __str__(self) -> str:
        return "".join(self.symbols)


AlphabetLike = Alphabet | str | Iterable[str]

DEFAULT = Alphabet.of(DEFAULT_ALPHABET)


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"Count must be non-negative, got {count}")


def _check_min_length(min_length: int) -> None:
    if min_length < 0:
        raise ValueError(f"Minimum length must be non-negative, got {min_length}")


def encode(count: int, alphabet: AlphabetLike = DEFAULT, min_length: int = 0) -> str:
    """Encode a count as a string in the given alphabet, left-padded to min_length."""
    _check_count(count)
    _check_min_length(min_length)
    alphabet = Alphabet.of(alphabet)
    base = alphabet.base

    digits = []
    while True:
        count, remainder = divmod(count, base)
        digits.append(alphabet[remainder])
        if count == 0:
            break

    if len(digits) < min_length:
        digits.extend(alphabet.zero * (min_length - len(digits)))
    return "".join(reversed(digits))


def decode(text: str, alphabet: AlphabetLike = DEFAULT) -> int:
    """Decode a string (most significant symbol first) to its count."""
    alphabet = Alphabet.of(alphabet)
    base = alphabet.base
    count = 0
    for symbol in text:
        if symbol not in alphabet:
            raise InvalidSymbolError(symbol, text)
        count = count * base + alphabet.position(symbol)
    return count


def digit_count(count: int, base: int) -> int:
    """Number of base-`base` digits in count, without padding (0 has one digit).

    Estimated from the bit length, then corrected with exact integer powers.
    """
    _check_count(count)
    if base < 2:
        raise DegenerateAlphabetError(f"Base must be at least 2, got {base}")
    if count == 0:
        return 1
    if (base & (base - 1)) == 0:
        bits = base.bit_length() - 1
        return (count.bit_length() + bits - 1) // bits

    n = max(0, int((count.bit_length() - 1) / math.log2(base)) - 1)
    while base ** (n + 1) <= count:
        n += 1
    while n > 0 and base ** n > count:
        n -= 1
    return n + 1


def encoded_length(count: int, alphabet: AlphabetLike = DEFAULT, min_length: int = 0) -> int:
    """Length of encode(count, alphabet, min_length) without building the string."""
    _check_min_length(min_length)
    alphabet = Alphabet.of(alphabet)
    return max(min_length, digit_count(count, alphabet.base))
