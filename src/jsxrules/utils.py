"""Generic list comparison helpers.

All helpers compare by equality (``==``), never identity, and work on
unhashable values too, so they can be reused on arbitrary sequences.
"""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def diff(a: Sequence[T], b: Sequence[T]) -> list[T]:
    """Elements of ``a`` not present in ``b``, keeping order and repeats."""
    return [x for x in a if x not in b]


def duplicates(seq: Sequence[T]) -> list[T]:
    """Every element that has an equal element earlier in ``seq``.

    Repeats are kept: ``duplicates(["x", "x", "x"]) == ["x", "x"]``.
    """
    return [x for i, x in enumerate(seq) if x in seq[:i]]


def unique(seq: Sequence[T]) -> list[T]:
    """First occurrence of each element, in order."""
    seen: list[T] = []
    for x in seq:
        if x not in seen:
            seen.append(x)
    return seen


def cyclic_match(seq: Sequence[T], pattern: Sequence[T]) -> bool:
    """Check that ``seq`` follows ``pattern`` repeated end to end.

    ``seq[i]`` must equal ``pattern[i % len(pattern)]`` for every index, so
    ``["A", "B", "A"]`` matches ``["A", "B"]`` and an empty ``seq`` matches
    any pattern.

    Raises:
        ValueError: If ``pattern`` is empty
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    return all(x == pattern[i % len(pattern)] for i, x in enumerate(seq))
