"""CartManager — the single source of truth for cart state.

The manager owns an ordered list of line items, persists a JSON snapshot
of it through a CartStorage after every mutation, and notifies
``"change"`` subscribers. Callers never touch the list itself: reads
return copies and writes go through the public operations below.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from storefront.domain.events import CHANGE, CartChangeEvent, EventEmitter, Listener
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.line_item import LineItem
from storefront.domain.model.pricing import PricingOptions, Summary, summarize
from storefront.domain.model.value_objects import (
    cap_quantity,
    clamp_quantity,
    is_number,
    to_decimal,
    to_json_number,
)
from storefront.domain.repository.cart_storage import CartStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "storefront_cart"


class CartManager:
    """Cart state with merge-on-add, bounded quantities and persistence.

    Construction immediately hydrates from *storage*. Persisted data is
    treated as untrusted: malformed records are dropped, an unreadable
    payload yields an empty cart. Write failures are logged and the cart
    carries on in memory.
    """

    def __init__(self, storage: CartStorage, key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._items: list[LineItem] = []
        self._events = EventEmitter()
        self._load()

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Any, quantity: int = 1) -> None:
        """Add *product* or merge into the existing line with the same id.

        *product* may be any object or mapping exposing ``id``, ``name``,
        ``price`` and ``image``. The requested quantity is clamped to
        ``[1, MAX_QUANTITY]`` and a merged total never exceeds MAX_QUANTITY.
        """
        product_id = _field(product, "id")
        price = _field(product, "price")
        if not product_id or not price:
            raise ValidationError("Invalid product: id and price are required")
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValidationError(f"Product id must be an integer, got {product_id!r}")

        unit_price = to_decimal(price)
        if not unit_price.is_finite() or unit_price <= 0:
            raise ValidationError(f"Invalid product price: {price!r}")
        qty = clamp_quantity(_as_int(quantity))

        existing = self._find(product_id)
        if existing is not None:
            existing.quantity = clamp_quantity(existing.quantity + qty)
        else:
            self._items.append(
                LineItem(
                    id=product_id,
                    name=str(_field(product, "name") or ""),
                    price=unit_price,
                    image=str(_field(product, "image") or ""),
                    quantity=qty,
                )
            )

        self._save()
        self._events.emit(CHANGE, CartChangeEvent("add", product_id))

    def remove_item(self, product_id: int) -> bool:
        """Remove the line for *product_id*; False if there was none."""
        for i, item in enumerate(self._items):
            if item.id == product_id:
                del self._items[i]
                break
        else:
            return False

        self._save()
        self._events.emit(CHANGE, CartChangeEvent("remove", product_id))
        return True

    def update_quantity(self, product_id: int, quantity: int) -> bool:
        """Set the quantity of an existing line.

        Zero or negative removes the line. Larger values are capped at
        MAX_QUANTITY; there is no lower clamp because the removal branch
        already covers it.
        """
        item = self._find(product_id)
        if item is None:
            return False

        qty = _as_int(quantity)
        if qty <= 0:
            return self.remove_item(product_id)

        item.quantity = cap_quantity(qty)
        self._save()
        self._events.emit(CHANGE, CartChangeEvent("update", product_id))
        return True

    def clear(self) -> None:
        self._items = []
        self._save()
        self._events.emit(CHANGE, CartChangeEvent("clear"))

    # --- Queries --------------------------------------------------------------

    def get_items(self) -> list[LineItem]:
        return [item.copy() for item in self._items]

    def get_item(self, product_id: int) -> LineItem | None:
        item = self._find(product_id)
        return item.copy() if item is not None else None

    def get_item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def get_subtotal(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal("0"))

    def get_summary(
        self,
        options: PricingOptions | Mapping[str, object] | None = None,
        **overrides: object,
    ) -> Summary:
        """Derive subtotal, discount, tax, shipping and total.

        ``cart.get_summary(coupon_discount=20, tax_rate="0.16", shipping_cost=50)``
        """
        return summarize(
            self.get_subtotal(),
            self.get_item_count(),
            PricingOptions.of(options, **overrides),
        )

    def is_empty(self) -> bool:
        return not self._items

    # --- Events ---------------------------------------------------------------

    def on(self, event: str, callback: Listener) -> Callable[[], None]:
        """Subscribe to *event* (only ``"change"`` is emitted)."""
        return self._events.on(event, callback)

    # --- Persistence ----------------------------------------------------------

    def _save(self) -> None:
        payload = json.dumps([_to_record(item) for item in self._items])
        try:
            self._storage.set_item(self._key, payload)
        except Exception:
            logger.error("Failed to persist cart under %r; keeping it in memory", self._key, exc_info=True)

    def _load(self) -> None:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.warning("Could not read persisted cart under %r; starting empty", self._key, exc_info=True)
            return
        if not raw:
            return

        try:
            parsed = json.loads(raw, parse_float=Decimal)
        except (ValueError, TypeError, RecursionError):
            logger.warning("Persisted cart under %r is not valid JSON; starting empty", self._key)
            return
        if not isinstance(parsed, list):
            logger.warning("Persisted cart under %r is not a list; starting empty", self._key)
            return

        seen: set[int] = set()
        for record in parsed:
            item = _from_record(record)
            if item is None or item.id in seen:
                continue
            seen.add(item.id)
            self._items.append(item)

        dropped = len(parsed) - len(self._items)
        if dropped:
            logger.debug("Dropped %d malformed cart record(s) from %r", dropped, self._key)

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: int) -> LineItem | None:
        for item in self._items:
            if item.id == product_id:
                return item
        return None


def _field(product: Any, name: str) -> Any:
    if isinstance(product, Mapping):
        return product.get(name)
    return getattr(product, name, None)


def _as_int(quantity: Any) -> int:
    if isinstance(quantity, bool) or not is_number(quantity):
        raise ValidationError(f"Quantity must be a number, got {quantity!r}")
    return int(quantity)


def _to_record(item: LineItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "price": to_json_number(item.price),
        "image": item.image,
        "quantity": item.quantity,
    }


def _from_record(record: Any) -> LineItem | None:
    """Rebuild a LineItem from a stored record, or None if it is malformed."""
    if not isinstance(record, dict):
        return None

    product_id = record.get("id")
    price = record.get("price")
    quantity = record.get("quantity")
    if not (is_number(product_id) and is_number(price) and is_number(quantity)):
        return None
    if int(product_id) != product_id or price < 0 or int(quantity) < 1:
        return None

    return LineItem(
        id=int(product_id),
        name=str(record.get("name") or ""),
        price=to_decimal(price),
        image=str(record.get("image") or ""),
        quantity=cap_quantity(int(quantity)),
    )
