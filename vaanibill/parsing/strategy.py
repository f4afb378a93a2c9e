"""Per-locale parsing strategies and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import Locale, Product
from .names import extract_english_name, extract_gujarati_name
from .normalize import normalize_english, normalize_gujarati
from .numbers import extract_quantity


class LocaleStrategy(ABC):
    """Locale-specific text handling used by the parsing engine."""

    locale: Locale

    @abstractmethod
    def normalize(self, text: str) -> str:
        ...

    @abstractmethod
    def extract_name(self, text: str) -> str:
        ...

    @abstractmethod
    def product_name(self, product: Product) -> str:
        """The catalog name compared against queries in this locale."""
        ...

    def extract_quantity(self, text: str) -> float:
        return extract_quantity(text, self.locale)

    def display_name(self, product: Product) -> str:
        return product.name_en


class EnglishStrategy(LocaleStrategy):
    locale = Locale.ENGLISH

    def normalize(self, text: str) -> str:
        return normalize_english(text)

    def extract_name(self, text: str) -> str:
        return extract_english_name(text)

    def product_name(self, product: Product) -> str:
        return product.name_en


class GujaratiStrategy(LocaleStrategy):
    locale = Locale.GUJARATI

    def normalize(self, text: str) -> str:
        return normalize_gujarati(text)

    def extract_name(self, text: str) -> str:
        return extract_gujarati_name(text)

    def product_name(self, product: Product) -> str:
        return product.name_gu

    def display_name(self, product: Product) -> str:
        return product.name_gu or product.name_en


_STRATEGIES: dict[Locale, LocaleStrategy] = {
    Locale.ENGLISH: EnglishStrategy(),
    Locale.GUJARATI: GujaratiStrategy(),
}


def get_strategy(locale: Locale | str) -> LocaleStrategy:
    """Return the strategy for ``locale`` (name or tag)."""
    return _STRATEGIES[Locale.parse(locale)]
