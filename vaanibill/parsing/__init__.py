"""Utterance parsing: normalization, quantities, units, names and matching."""

from .builder import build_line_item
from .engine import parse_utterance
from .matcher import match_product
from .names import extract_name
from .normalize import normalize
from .numbers import extract_quantity
from .strategy import EnglishStrategy, GujaratiStrategy, LocaleStrategy, get_strategy

__all__ = [
    "parse_utterance",
    "normalize",
    "extract_quantity",
    "extract_name",
    "match_product",
    "build_line_item",
    "LocaleStrategy",
    "EnglishStrategy",
    "GujaratiStrategy",
    "get_strategy",
]
