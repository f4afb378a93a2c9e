"""Utterance → line item pipeline."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Locale, ParseError, ParseResult, Product
from .builder import build_line_item
from .matcher import match_product
from .strategy import get_strategy


def parse_utterance(
    text: str, locale: Locale | str, catalog: Iterable[Product]
) -> ParseResult:
    """Resolve one finalized utterance into a priced line item.

    Pure and synchronous. Failures are returned in ``ParseResult.error``
    and never raised.

    Args:
        text: Finalized transcript or typed input, e.g. "two kg sugar".
        locale: Active locale.
        catalog: Ordered product snapshot; order breaks match ties.
    """
    strategy = get_strategy(locale)
    quantity = strategy.extract_quantity(text)
    name = strategy.extract_name(text)
    if not name:
        return ParseResult(error=ParseError.EMPTY_NAME, quantity=quantity)

    product = match_product(name, strategy.locale, catalog)
    if product is None:
        return ParseResult(
            error=ParseError.PRODUCT_NOT_FOUND, quantity=quantity, name=name
        )

    return ParseResult(
        item=build_line_item(product, quantity, strategy.locale),
        quantity=quantity,
        name=name,
    )
