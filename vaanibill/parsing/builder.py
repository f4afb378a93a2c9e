"""Line-item construction from a matched product."""

from __future__ import annotations

from ..models import BillItem, Locale, Product
from .strategy import get_strategy


def build_line_item(
    product: Product, quantity: float, locale: Locale | str = Locale.ENGLISH
) -> BillItem:
    """Price ``quantity`` of ``product`` as a new draft line item.

    The total is left unrounded here; manual edits round it.
    """
    return BillItem(
        name=get_strategy(locale).display_name(product),
        rate=product.rate,
        quantity=quantity,
        total=product.rate * quantity,
    )
