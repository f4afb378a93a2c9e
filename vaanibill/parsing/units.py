"""Unit vocabularies removed before product-name extraction."""

from __future__ import annotations

UNITS: frozenset[str] = frozenset({
    "kg",
    "kgs",
    "kilogram",
    "kilograms",
    "gm",
    "g",
    "gram",
    "grams",
    "litre",
    "liter",
    "liters",
    "litres",
})

# Removal order matters: "કિલો" is a prefix of "કિલોગ્રામ", whose
# remainder "ગ્રામ" is then removed by the next pass.
GUJARATI_UNITS: tuple[str, ...] = ("કિલો", "કિલોગ્રામ", "ગ્રામ", "લિટર", "લીટર")


def is_unit(token: str) -> bool:
    return token in UNITS


def strip_units(tokens: list[str]) -> list[str]:
    """Drop English unit tokens (tokens as produced by ``tokenize``)."""
    return [token for token in tokens if not is_unit(token)]


def remove_gujarati_units(text: str) -> str:
    """Replace every literal occurrence of a Gujarati unit word with a space."""
    for unit in GUJARATI_UNITS:
        text = text.replace(unit, " ")
    return text
