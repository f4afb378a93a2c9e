"""The in-memory draft bill and bill numbering."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from .models import BillItem

_CENT = Decimal("0.01")


def round_money(value: float) -> float:
    """Round to 2 decimals with halves rounded up (3.125 -> 3.13)."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def format_bill_number(day: date, sequence: int) -> str:
    """Format a bill number such as ``BILL190926_3``.

    ``sequence`` is the 1-based position of the bill within ``day``.
    """
    if sequence < 1:
        raise ValueError(f"Bill sequence must be >= 1, got {sequence}")
    return f"BILL{day.strftime('%d%m%y')}_{sequence}"


class DraftBill:
    """Ordered line items for the bill currently being built."""

    def __init__(self, items: list[BillItem] | None = None) -> None:
        self._items: list[BillItem] = list(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def items(self) -> tuple[BillItem, ...]:
        return tuple(self._items)

    @property
    def total(self) -> float:
        return sum(item.total for item in self._items)

    def add(self, item: BillItem) -> BillItem:
        self._items.append(item)
        return item

    def get(self, item_id: str) -> BillItem:
        for item in self._items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)

    def update_item(
        self,
        item_id: str,
        *,
        name: str | None = None,
        quantity: float | None = None,
        rate: float | None = None,
    ) -> BillItem:
        """Apply a manual edit and recompute the rounded total.

        Raises:
            KeyError: If no item has ``item_id``.
            ValueError: If quantity is not positive or rate is negative.
        """
        item = self.get(item_id)
        new_quantity = item.quantity if quantity is None else float(quantity)
        new_rate = item.rate if rate is None else float(rate)
        if new_quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {new_quantity}")
        if new_rate < 0:
            raise ValueError(f"Rate must not be negative, got {new_rate}")

        if name is not None:
            item.name = name
        item.quantity = new_quantity
        item.rate = new_rate
        item.total = round_money(new_quantity * new_rate)
        return item

    def remove_item(self, item_id: str) -> None:
        item = self.get(item_id)
        self._items.remove(item)

    def clear(self) -> None:
        self._items.clear()

    def to_payload(self) -> dict:
        """Serialize for the bill-finalization collaborator.

        Raises:
            ValueError: If the bill has no items.
        """
        if not self._items:
            raise ValueError("Add at least one item before completing the bill.")
        return {
            "items": [
                {
                    "name": item.name,
                    "rate": item.rate,
                    "quantity": item.quantity,
                    "total": item.total,
                }
                for item in self._items
            ],
            "total": self.total,
        }

    def display(self) -> str:
        """Plain-text rendering for terminals."""
        if not self._items:
            return "No items yet."
        lines = [f"{'Item':<24} {'Qty':>8} {'Rate':>10} {'Total':>10}"]
        for item in self._items:
            lines.append(
                f"{item.name:<24} {item.quantity:>8g} "
                f"{item.rate:>10.2f} {item.total:>10.2f}"
            )
        lines.append(f"{'Total':<24} {'':>8} {'':>10} {self.total:>10.2f}")
        return "\n".join(lines)
