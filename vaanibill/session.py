"""Billing session: owns the catalog snapshot, locale, draft and capture."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .bill import DraftBill
from .capture import TranscriptSource
from .models import Locale, ParseResult, Product
from .parsing import parse_utterance

logger = logging.getLogger(__name__)


class BillingSession:
    """Controller for one billing session.

    Each finalized transcript or typed submission is parsed once, in
    arrival order, and appends at most one line item to the draft bill.
    """

    def __init__(
        self,
        catalog: Iterable[Product],
        locale: Locale | str = Locale.ENGLISH,
        bill: DraftBill | None = None,
    ) -> None:
        self._catalog: tuple[Product, ...] = tuple(catalog)
        self._locale = Locale.parse(locale)
        self.bill = bill if bill is not None else DraftBill()
        self._source: TranscriptSource | None = None
        self.last_transcript = ""
        self.last_error = ""

    @property
    def catalog(self) -> tuple[Product, ...]:
        return self._catalog

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def listening(self) -> bool:
        return self._source is not None and not self._source.stopped

    def refresh_catalog(self, products: Iterable[Product]) -> None:
        """Replace the snapshot; items already on the bill are unchanged."""
        self._catalog = tuple(products)
        logger.debug("Catalog snapshot replaced (%d products)", len(self._catalog))

    def set_locale(self, locale: Locale | str) -> None:
        """Switch locale. An active capture session is torn down."""
        new_locale = Locale.parse(locale)
        if new_locale is self._locale:
            return
        self.stop_capture()
        self._locale = new_locale
        logger.info("Locale changed to %s", new_locale.value)

    def submit(self, text: str) -> ParseResult:
        """Parse one utterance and append the resulting item, if any."""
        self.last_transcript = text
        result = parse_utterance(text, self._locale, self._catalog)
        if result.ok:
            self.bill.add(result.item)
            self.last_error = ""
            logger.debug(
                "Added %s x %g = %.2f",
                result.item.name,
                result.item.quantity,
                result.item.total,
            )
        else:
            self.last_error = result.message
            logger.info("Rejected %r: %s", text, result.error.name)
        return result

    async def listen(self, source: TranscriptSource) -> list[ParseResult]:
        """Consume finalized transcripts from ``source`` until it ends.

        Any previously attached source is stopped first.
        """
        self.stop_capture()
        self._source = source
        results: list[ParseResult] = []
        try:
            async for text in source.transcripts():
                results.append(self.submit(text))
        finally:
            if self._source is source:
                self._source = None
            source.stop()
        return results

    def stop_capture(self) -> None:
        if self._source is not None:
            self._source.stop()
            self._source = None
