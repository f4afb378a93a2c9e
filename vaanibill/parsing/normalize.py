"""Locale-specific canonical forms used for catalog comparison."""

from __future__ import annotations

import re

from ..models import Locale

_NON_ENGLISH = re.compile(r"[^a-z0-9 ]")
# Gujarati Unicode block U+0A80..U+0AFF
_NON_GUJARATI = re.compile(r"[^\u0A80-\u0AFF ]")
_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def normalize_english(text: str) -> str:
    """Lowercase and keep only ``[a-z0-9 ]``.

    Tabs and newlines are dropped rather than turned into spaces.
    """
    return collapse_whitespace(_NON_ENGLISH.sub("", text.lower()))


def normalize_gujarati(text: str) -> str:
    """Keep only Gujarati-block characters and spaces."""
    return collapse_whitespace(_NON_GUJARATI.sub("", text))


def normalize(text: str, locale: Locale | str) -> str:
    """Return the canonical form of ``text`` for ``locale``."""
    if Locale.parse(locale) is Locale.GUJARATI:
        return normalize_gujarati(text)
    return normalize_english(text)
