"""Abstract key-value channel the cart persists itself through.

Defined in the domain layer so the cart never depends on infrastructure.
Values are opaque text; the cart owns the serialization format.
Implementations raise StorageError when the underlying medium fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CartStorage(ABC):

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the text stored under *key*, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
