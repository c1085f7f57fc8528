"""Short sequential identifiers over custom alphabets."""

from lightid.core.numeral import (
    DEFAULT_ALPHABET,
    Alphabet,
    DegenerateAlphabetError,
    DuplicateSymbolError,
    InvalidSymbolError,
    NumeralError,
    decode,
    encode,
    encoded_length,
)
from lightid.engine.generator import GeneratorConfig, SequenceGenerator
from lightid.engine.switcher import Direction, IdSwitcher
from lightid.engine.state import StateError, dump_state, load_state

__all__ = [
    "DEFAULT_ALPHABET",
    "Alphabet",
    "DegenerateAlphabetError",
    "Direction",
    "DuplicateSymbolError",
    "GeneratorConfig",
    "IdSwitcher",
    "InvalidSymbolError",
    "NumeralError",
    "SequenceGenerator",
    "StateError",
    "decode",
    "dump_state",
    "encode",
    "encoded_length",
    "load_state",
]
