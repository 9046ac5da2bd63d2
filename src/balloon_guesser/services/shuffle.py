"""Fisher-Yates shuffle driven by a cryptographically strong byte source."""

import secrets
from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

ByteSource = Callable[[int], bytes]


def secure_random_index(
    upper: int, token_bytes: ByteSource = secrets.token_bytes
) -> int:
    """Return an index in ``[0, upper)`` scaled from random bytes.

    Draws the fewest bytes that cover the range and scales the big-endian value
    as ``floor(value / 256**width * upper)``. Without rejection sampling some
    indices are slightly more likely than others when ``upper`` does not divide
    ``256**width``. The skew is negligible for shuffling game rounds and is not
    suitable where uniformity is a security property.
    """
    if upper <= 1:
        return 0
    width = ((upper - 1).bit_length() + 7) // 8
    value = int.from_bytes(token_bytes(width), "big")
    return value * upper // 256**width


def secure_shuffle(
    items: Sequence[T], token_bytes: ByteSource = secrets.token_bytes
) -> list[T]:
    """Return a shuffled copy of ``items``."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = secure_random_index(i + 1, token_bytes)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
