"""Dict-backed CartStorage for sessions that should not outlive the process."""

from __future__ import annotations

from storefront.domain.repository.cart_storage import CartStorage


class InMemoryStorage(CartStorage):

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def get_item(self, key: str) -> str | None:
        return self._entries.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._entries[key] = value
