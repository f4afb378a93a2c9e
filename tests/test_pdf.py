"""Tests for bill PDF generation."""

import sys
from unittest.mock import patch

import pytest

from vaanibill.bill import DraftBill
from vaanibill.models import BillItem


def _make_bill(gujarati: bool = False) -> DraftBill:
    return DraftBill([
        BillItem(name="ખાંડ" if gujarati else "sugar", rate=50.0, quantity=2.0, total=100.0),
        BillItem(name="rice", rate=40.0, quantity=1.5, total=60.0),
    ])


def _require_reportlab():
    try:
        from reportlab.lib.pagesizes import A4  # noqa: F401
    except ImportError:
        pytest.skip("reportlab not installed")


class TestPDFGeneration:
    def test_generate_pdf_import_error(self, tmp_path):
        """generate_bill_pdf raises ImportError when reportlab is missing."""
        from vaanibill.pdf import generate_bill_pdf

        with patch.dict(sys.modules, {"reportlab": None, "reportlab.lib": None}):
            with pytest.raises(ImportError, match="vaanibill\\[pdf\\]"):
                generate_bill_pdf(_make_bill(), tmp_path / "bill.pdf")

    def test_generate_pdf_ascii_without_font(self, tmp_path):
        """English-only bills render with the built-in font."""
        _require_reportlab()
        from vaanibill.pdf import generate_bill_pdf

        output = tmp_path / "nested" / "bill.pdf"
        with patch("vaanibill.pdf._FONT_SEARCH_PATHS", ["/nonexistent/font.ttf"]):
            result = generate_bill_pdf(_make_bill(), output, bill_number="BILL190926_1")

        assert result == output
        assert output.exists()
        with open(output, "rb") as f:
            assert f.read(4) == b"%PDF"

    def test_generate_pdf_gujarati_needs_font(self, tmp_path):
        _require_reportlab()
        from vaanibill.pdf import generate_bill_pdf

        with patch("vaanibill.pdf._FONT_SEARCH_PATHS", ["/nonexistent/font.ttf"]):
            with pytest.raises(FileNotFoundError, match="Gujarati font"):
                generate_bill_pdf(_make_bill(gujarati=True), tmp_path / "bill.pdf")

    def test_generate_pdf_gujarati(self, tmp_path):
        _require_reportlab()
        from vaanibill.pdf import _find_gujarati_font, generate_bill_pdf

        try:
            _find_gujarati_font()
        except FileNotFoundError:
            pytest.skip("No Gujarati font available")

        output = tmp_path / "bill.pdf"
        generate_bill_pdf(_make_bill(gujarati=True), output)
        assert output.stat().st_size > 0


class TestFontDiscovery:
    def test_find_gujarati_font_not_found(self):
        """_find_gujarati_font raises when no font exists."""
        from vaanibill.pdf import _find_gujarati_font

        with patch("vaanibill.pdf._FONT_SEARCH_PATHS", ["/nonexistent/font.ttf"]):
            with pytest.raises(FileNotFoundError, match="No Gujarati font"):
                _find_gujarati_font()

    def test_find_gujarati_font(self, tmp_path):
        from vaanibill.pdf import _find_gujarati_font

        font = tmp_path / "Gujarati.ttf"
        font.write_bytes(b"")
        with patch("vaanibill.pdf._FONT_SEARCH_PATHS", ["/nonexistent.ttf", str(font)]):
            assert _find_gujarati_font() == str(font)
