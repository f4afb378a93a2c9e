"""Product-name extraction: what is left once quantity and unit are gone."""

from __future__ import annotations

import re

from ..models import Locale
from .normalize import collapse_whitespace
from .numbers import WORD_NUMBERS, is_numeric_literal, tokenize
from .units import remove_gujarati_units, strip_units

# ASCII digits and Gujarati digits U+0AE6..U+0AEF
_DIGITS = re.compile(r"[0-9\u0AE6-\u0AEF]")


def extract_english_name(text: str) -> str:
    tokens = [
        token
        for token in tokenize(text)
        if not is_numeric_literal(token) and token not in WORD_NUMBERS
    ]
    return " ".join(strip_units(tokens))


def extract_gujarati_name(text: str) -> str:
    """Remove digits and unit words.

    If removing units leaves nothing, the digit-free text is returned
    instead, so a product literally named like a unit can still match.
    """
    cleaned = collapse_whitespace(_DIGITS.sub(" ", text))
    without_units = collapse_whitespace(remove_gujarati_units(cleaned))
    return without_units or cleaned


def extract_name(text: str, locale: Locale | str) -> str:
    """Return the product-name phrase of an utterance; may be empty."""
    if Locale.parse(locale) is Locale.GUJARATI:
        return extract_gujarati_name(text)
    return extract_english_name(text)
