"""Containment-based catalog matching."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import Locale, Product
from .strategy import get_strategy


def match_product(
    name: str, locale: Locale | str, catalog: Iterable[Product]
) -> Product | None:
    """Find the first catalog product whose name is contained in ``name``.

    Both sides are normalized for ``locale``. Products are tried in the
    order the catalog supplies them and the first containing one wins, so
    with ``[tea, tea leaves]`` the query "tea leaves special" returns tea.
    Products with no usable name in this locale are skipped.

    Returns:
        The matched product, or None.
    """
    strategy = get_strategy(locale)
    query = strategy.normalize(name)
    if not query:
        return None

    for product in catalog:
        candidate = strategy.normalize(strategy.product_name(product))
        if candidate and candidate in query:
            return product
    return None
