"""Catalog snapshot loading from JSON exports."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import Product

logger = logging.getLogger(__name__)


def product_from_record(record: dict) -> Product:
    """Build a Product from a ``{id, nameEn, nameGu, rate}`` record.

    Snake-case keys (``name_en``, ``name_gu``) are accepted too. Names are
    trimmed.

    Raises:
        ValueError: If the English name is missing or the rate is not a
            non-negative number.
    """
    if not isinstance(record, dict):
        raise ValueError(f"Catalog record must be an object, got {record!r}")

    name_en = record.get("nameEn", record.get("name_en"))
    name_gu = record.get("nameGu", record.get("name_gu")) or ""
    rate = record.get("rate")

    if not isinstance(name_en, str) or not name_en.strip():
        raise ValueError(f"English name required: {record!r}")
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise ValueError(f"Numeric rate required: {record!r}")
    if rate < 0:
        raise ValueError(f"Rate must not be negative: {record!r}")

    return Product(
        id=record.get("id", name_en.strip()),
        name_en=name_en.strip(),
        name_gu=name_gu.strip() if isinstance(name_gu, str) else "",
        rate=float(rate),
    )


def parse_catalog(data: list | dict) -> tuple[Product, ...]:
    """Convert decoded JSON into an ordered product snapshot.

    ``data`` is either a list of records or ``{"products": [...]}``.
    Invalid records are logged and skipped; the order of the rest is kept.
    """
    records = data.get("products", []) if isinstance(data, dict) else data
    products: list[Product] = []
    for index, record in enumerate(records):
        try:
            products.append(product_from_record(record))
        except ValueError as e:
            logger.warning("Skipping catalog record %d: %s", index, e)
    return tuple(products)


def load_catalog(path: str | Path) -> tuple[Product, ...]:
    """Load a catalog snapshot from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    products = parse_catalog(data)
    logger.info("Loaded %d products from %s", len(products), path)
    return products
