"""Generator position snapshots.

A snapshot is a msgpack map: {"c": count, "a": alphabet, "m": min_length}.
The count is stored as big-endian unsigned bytes because msgpack integers
stop at 64 bits and counters do not.
"""

import logging

import msgpack

from lightid.engine.generator import SequenceGenerator

logger = logging.getLogger(__name__)


class StateError(ValueError):
    """Snapshot bytes could not be interpreted."""


def _count_to_bytes(count):
    return count.to_bytes(max(1, (count.bit_length() + 7) // 8), "big")


def dump_state(generator: SequenceGenerator) -> bytes:
    """Serialize a generator's position and rendering configuration."""
    return msgpack.packb({
        "c": _count_to_bytes(generator.count),
        "a": str(generator.alphabet),
        "m": generator.min_length,
    }, use_bin_type=True)


def load_state(data: bytes) -> SequenceGenerator:
    """Rebuild a generator from dump_state() output."""
    try:
        record = msgpack.unpackb(data, raw=False)
    except ValueError as e:
        raise StateError(f"Unreadable state snapshot: {e}") from e

    if not isinstance(record, dict) or not {"c", "a", "m"} <= record.keys():
        raise StateError(f"State snapshot must be a map with c/a/m keys, got {record!r}")

    count, alphabet, min_length = record["c"], record["a"], record["m"]
    if not isinstance(count, bytes):
        raise StateError(f"Count must be bytes, got {type(count).__name__}")
    if not isinstance(alphabet, str):
        raise StateError(f"Alphabet must be a string, got {type(alphabet).__name__}")
    if not isinstance(min_length, int) or min_length < 0:
        raise StateError(f"Minimum length must be a non-negative integer, got {min_length!r}")

    generator = SequenceGenerator(alphabet, min_length, int.from_bytes(count, "big"))
    logger.debug("restored %r", generator)
    return generator
