"""Data models shared by the parser, the draft bill and the session."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class Locale(str, Enum):
    """Active input language."""

    ENGLISH = "english"
    GUJARATI = "gujarati"

    @classmethod
    def parse(cls, value: str | Locale) -> Locale:
        """Resolve a locale from its name or a browser-style tag.

        Accepts ``english`` / ``gujarati``, ``en`` / ``gu`` and
        ``en-IN`` / ``gu-IN`` (case-insensitive).
        """
        if isinstance(value, Locale):
            return value
        key = str(value).strip().lower()
        match key:
            case "english" | "en" | "en-in":
                return cls.ENGLISH
            case "gujarati" | "gu" | "gu-in":
                return cls.GUJARATI
            case _:
                raise ValueError(
                    f"Unknown locale: {value!r} (choose english or gujarati)"
                )


@dataclass(frozen=True)
class Product:
    """A catalog entry. ``name_gu`` may be empty."""

    id: int | str
    name_en: str
    name_gu: str = ""
    rate: float = 0.0


def _new_item_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class BillItem:
    """One priced row on a draft bill."""

    name: str
    rate: float
    quantity: float
    total: float
    id: str = field(default_factory=_new_item_id, compare=False)


class ParseError(Enum):
    """Expected, user-facing reasons an utterance yields no line item."""

    EMPTY_NAME = "Say a product name like 'two kg sugar'."
    PRODUCT_NOT_FOUND = "Product not found in your catalog."

    @property
    def message(self) -> str:
        return self.value


@dataclass
class ParseResult:
    """Outcome of parsing one utterance: either ``item`` or ``error`` is set."""

    item: BillItem | None = None
    error: ParseError | None = None
    quantity: float = 1.0
    name: str = ""

    @property
    def ok(self) -> bool:
        return self.item is not None

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""
