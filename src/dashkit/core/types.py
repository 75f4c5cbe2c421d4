"""Reusable type definitions for dashkit.

Each collection operation asks only for the element capabilities it
actually uses, so the bounds are split into small protocols instead of one
element interface.

Type Aliases:
    SortedHint: The advisory sortedness flag attached to a secondary collection.
        ``None`` and ``False`` select linear search, ``True`` selects binary search.

Protocols:
    Equatable: Elements compared with ``==`` (membership tests).
    Orderable: Elements with a total order (binary search fast path).
    Hashable: Re-exported from ``collections.abc`` for set-based operations.
"""

from collections.abc import Hashable
from typing import Any, Optional, Protocol, TypeVar

__all__ = [
    "Equatable",
    "Orderable",
    "Hashable",
    "SortedHint",
    "T",
    "EqT",
    "OrdT",
    "HashT",
]


class Equatable(Protocol):
    def __eq__(self, other: Any, /) -> bool: ...


class Orderable(Equatable, Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


SortedHint = Optional[bool]

T = TypeVar("T")
EqT = TypeVar("EqT", bound=Equatable)
OrdT = TypeVar("OrdT", bound=Orderable)
HashT = TypeVar("HashT", bound=Hashable)
