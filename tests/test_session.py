"""Tests for the billing session controller."""

import pytest

from vaanibill.capture import StaticTranscriptSource
from vaanibill.models import Locale, ParseError, Product
from vaanibill.session import BillingSession


@pytest.fixture
def catalog():
    return [
        Product(id=1, name_en="sugar", name_gu="ખાંડ", rate=50.0),
        Product(id=2, name_en="rice", name_gu="ચોખા", rate=40.0),
    ]


@pytest.fixture
def session(catalog):
    return BillingSession(catalog, Locale.ENGLISH)


class TestSubmit:
    def test_accepted(self, session):
        result = session.submit("two kg sugar")
        assert result.ok
        assert len(session.bill) == 1
        assert session.bill.total == 100.0
        assert session.last_transcript == "two kg sugar"
        assert session.last_error == ""

    def test_rejected_does_not_append(self, session):
        result = session.submit("two kg salt")
        assert result.error is ParseError.PRODUCT_NOT_FOUND
        assert len(session.bill) == 0
        assert session.last_error == "Product not found in your catalog."

    def test_error_cleared_on_success(self, session):
        session.submit("")
        assert session.last_error
        session.submit("rice")
        assert session.last_error == ""

    def test_locale_change_does_not_reparse(self, session):
        session.submit("sugar")
        session.set_locale("gu-IN")
        session.submit("બે કિલો ચોખા")
        assert [item.name for item in session.bill.items] == ["sugar", "ચોખા"]
        assert session.locale is Locale.GUJARATI

    def test_catalog_snapshot_is_immutable(self, catalog):
        session = BillingSession(catalog)
        catalog.append(Product(id=3, name_en="salt", rate=20.0))
        assert not session.submit("salt").ok

    def test_refresh_catalog(self, session):
        session.submit("sugar")
        session.refresh_catalog([Product(id=1, name_en="sugar", rate=55.0)])
        session.submit("sugar")
        assert [item.rate for item in session.bill.items] == [50.0, 55.0]


class TestListen:
    @pytest.mark.asyncio
    async def test_processes_in_order(self, session):
        source = StaticTranscriptSource(["two kg sugar", "unknown", "1.5 kg rice"])
        results = await session.listen(source)
        assert [r.ok for r in results] == [True, False, True]
        assert [item.name for item in session.bill.items] == ["sugar", "rice"]
        assert session.bill.total == 160.0
        assert not session.listening
        assert source.stopped

    def test_locale_change_stops_capture(self, session):
        source = StaticTranscriptSource(["sugar", "rice", "sugar"])
        session._source = source
        assert session.listening
        session.set_locale(Locale.GUJARATI)
        assert source.stopped
        assert not session.listening

    @pytest.mark.asyncio
    async def test_stop_capture_mid_stream(self, session):
        class StoppingSource(StaticTranscriptSource):
            def __init__(self, lines, owner):
                super().__init__(lines)
                self.owner = owner

            async def _next(self):
                for i, line in enumerate(self._lines):
                    if i == 1:
                        self.owner.stop_capture()
                    yield line

        source = StoppingSource(["sugar", "rice", "sugar"], session)
        results = await session.listen(source)
        assert len(results) == 1
        assert len(session.bill) == 1

    def test_same_locale_keeps_capture(self, session):
        source = StaticTranscriptSource([])
        session._source = source
        session.set_locale("english")
        assert not source.stopped
