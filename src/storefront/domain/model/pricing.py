"""Pricing options and the derived cart summary.

Neither is ever persisted: a Summary is recomputed from the current items
each time it is requested.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import round_money, to_decimal

ZERO = Decimal("0")


@dataclass(frozen=True)
class PricingOptions:
    """Per-request pricing knobs.

    New options must default to a neutral value so callers that omit them
    keep getting the same totals.
    """

    coupon_discount: Decimal = ZERO
    tax_rate: Decimal = ZERO  # fraction, e.g. 0.16
    shipping_cost: Decimal = ZERO

    def __post_init__(self) -> None:
        for f in fields(self):
            value = to_decimal(getattr(self, f.name))
            if value < ZERO:
                raise ValidationError(f"{f.name} cannot be negative, got {value}")
            object.__setattr__(self, f.name, value)

    @staticmethod
    def of(
        options: PricingOptions | Mapping[str, object] | None = None,
        **overrides: object,
    ) -> PricingOptions:
        """Build options from an instance, a mapping, keywords, or nothing."""
        if options is None:
            base = PricingOptions()
        elif isinstance(options, PricingOptions):
            base = options
        else:
            base = PricingOptions(**_known_keys(options))
        if overrides:
            base = replace(base, **_known_keys(overrides))
        return base


def _known_keys(values: Mapping[str, object]) -> dict[str, object]:
    known = {f.name for f in fields(PricingOptions)}
    unknown = set(values) - known
    if unknown:
        raise ValidationError(f"Unknown pricing option(s): {', '.join(sorted(unknown))}")
    return dict(values)


@dataclass(frozen=True)
class Summary:
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    item_count: int


def summarize(subtotal: Decimal, item_count: int, options: PricingOptions) -> Summary:
    """Derive discount, tax, shipping and total for a cart.

    - the coupon never discounts more than the subtotal
    - tax applies after the discount and is rounded half-up to cents
    - shipping is waived for an empty cart
    - the total never goes below zero
    """
    discount = min(options.coupon_discount, subtotal)
    taxable_amount = subtotal - discount
    tax = round_money(taxable_amount * options.tax_rate)
    shipping = ZERO if item_count == 0 else options.shipping_cost
    total = max(ZERO, taxable_amount + tax + shipping)

    return Summary(
        subtotal=subtotal,
        discount=discount,
        tax=tax,
        shipping=shipping,
        total=total,
        item_count=item_count,
    )
