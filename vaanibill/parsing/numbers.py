"""Quantity extraction from numeric literals and number words."""

from __future__ import annotations

import re

from ..models import Locale

WORD_NUMBERS: dict[str, float] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "half": 0.5,
}

# Gujarati digits and words, matched against untouched whitespace tokens
GUJARATI_NUMBERS: dict[str, float] = {
    "૦": 0,
    "૧": 1,
    "૨": 2,
    "૩": 3,
    "૪": 4,
    "૫": 5,
    "૬": 6,
    "૭": 7,
    "૮": 8,
    "૯": 9,
    "એક": 1,
    "બે": 2,
    "ત્રણ": 3,
    "ચાર": 4,
    "પાંચ": 5,
    "છ": 6,
    "સાત": 7,
    "આઠ": 8,
    "નવ": 9,
    "દસ": 10,
    "અડધો": 0.5,
    "અડધી": 0.5,
}

DEFAULT_QUANTITY = 1.0

_TOKEN_STRIP = re.compile(r"[^a-z0-9.]")
# Plain decimals only: "2", "1.5", ".5", "2." (no sign, exponent, inf or nan)
_DECIMAL = re.compile(r"(?:\d+\.?\d*|\.\d+)")


def tokenize(text: str) -> list[str]:
    """Lowercase, split on whitespace and strip tokens to ``[a-z0-9.]``.

    Tokens left empty by stripping (e.g. pure Gujarati words) are dropped.
    """
    tokens = (_TOKEN_STRIP.sub("", token) for token in text.lower().split())
    return [token for token in tokens if token]


def is_numeric_literal(token: str) -> bool:
    return _DECIMAL.fullmatch(token) is not None


def _scan_english(tokens: list[str]) -> float | None:
    for token in tokens:
        if is_numeric_literal(token):
            return float(token)
        if token in WORD_NUMBERS:
            return float(WORD_NUMBERS[token])
    return None


def _scan_gujarati(text: str) -> float | None:
    for token in text.split():
        if token in GUJARATI_NUMBERS:
            return float(GUJARATI_NUMBERS[token])
    return None


def extract_quantity(text: str, locale: Locale | str = Locale.ENGLISH) -> float:
    """Find the leading quantity in an utterance.

    The English scan runs first for every locale; the Gujarati table is
    only consulted when it finds nothing. ``locale`` is accepted for
    interface symmetry and does not change the result.

    Returns:
        The quantity, or 1.0 when nothing is found or the value is 0.
    """
    quantity = _scan_english(tokenize(text))
    if quantity is None:
        quantity = _scan_gujarati(text)
    return quantity or DEFAULT_QUANTITY
