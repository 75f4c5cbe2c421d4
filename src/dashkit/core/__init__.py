"""Core type definitions and configuration."""

from dashkit.core.config import Settings, settings
from dashkit.core.types import Equatable, Hashable, Orderable, SortedHint

__all__ = [
    "Settings",
    "settings",
    "Equatable",
    "Hashable",
    "Orderable",
    "SortedHint",
]
