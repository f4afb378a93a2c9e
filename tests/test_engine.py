"""Tests for the utterance-to-line-item pipeline."""

import pytest

from vaanibill.models import BillItem, Locale, ParseError, Product
from vaanibill.parsing import build_line_item, get_strategy, parse_utterance
from vaanibill.parsing.strategy import EnglishStrategy, GujaratiStrategy


@pytest.fixture
def sugar():
    return Product(id=1, name_en="sugar", name_gu="ખાંડ", rate=50.0)


@pytest.fixture
def rice():
    return Product(id=2, name_en="rice", name_gu="", rate=40.0)


class TestParseUtterance:
    def test_two_kg_sugar(self, sugar):
        result = parse_utterance("two kg sugar", Locale.ENGLISH, [sugar])
        assert result.ok
        assert result.error is None
        assert result.item.quantity == 2.0
        assert result.item.rate == 50.0
        assert result.item.total == 100.0
        assert result.item.name == "sugar"

    def test_decimal_rice(self, rice):
        result = parse_utterance("1.5 kg rice", Locale.ENGLISH, [rice])
        assert result.item.quantity == 1.5
        assert result.item.total == 60.0

    def test_gujarati(self, sugar):
        result = parse_utterance("બે કિલો ખાંડ", Locale.GUJARATI, [sugar])
        assert result.ok
        assert result.item.quantity == 2.0
        assert result.item.name == "ખાંડ"
        assert result.item.total == 100.0

    def test_gujarati_tag(self, sugar):
        result = parse_utterance("૩ કિલો ખાંડ", "gu-IN", [sugar])
        assert result.item.quantity == 3.0

    def test_default_quantity(self, sugar):
        result = parse_utterance("sugar please", Locale.ENGLISH, [sugar])
        assert result.item.quantity == 1.0
        assert result.item.total == 50.0

    @pytest.mark.parametrize("text", ["", "   ", "two kg", "\t"])
    def test_empty_name(self, sugar, text):
        result = parse_utterance(text, Locale.ENGLISH, [sugar])
        assert not result.ok
        assert result.error is ParseError.EMPTY_NAME
        assert result.message == "Say a product name like 'two kg sugar'."

    def test_empty_gujarati(self, sugar):
        result = parse_utterance("  ", Locale.GUJARATI, [sugar])
        assert result.error is ParseError.EMPTY_NAME

    def test_product_not_found(self, sugar):
        result = parse_utterance("two kg salt", Locale.ENGLISH, [sugar])
        assert result.error is ParseError.PRODUCT_NOT_FOUND
        assert result.name == "salt"
        assert result.quantity == 2.0
        assert result.message == "Product not found in your catalog."

    def test_latin_text_in_gujarati_locale(self, sugar):
        result = parse_utterance("two kg sugar", Locale.GUJARATI, [sugar])
        assert result.error is ParseError.PRODUCT_NOT_FOUND

    def test_same_inputs_same_result(self, sugar):
        first = parse_utterance("two kg sugar", Locale.ENGLISH, [sugar])
        second = parse_utterance("two kg sugar", Locale.ENGLISH, [sugar])
        assert first == second
        assert first.item.id != second.item.id


class TestBuildLineItem:
    def test_total_unrounded(self):
        product = Product(id=1, name_en="ghee", rate=33.33)
        item = build_line_item(product, 3, Locale.ENGLISH)
        assert item.total == 33.33 * 3

    def test_display_name_gujarati(self, sugar):
        assert build_line_item(sugar, 1, Locale.GUJARATI).name == "ખાંડ"

    def test_display_name_falls_back_to_english(self, rice):
        assert build_line_item(rice, 1, Locale.GUJARATI).name == "rice"

    def test_display_name_english(self, sugar):
        assert build_line_item(sugar, 1, Locale.ENGLISH).name == "sugar"

    def test_ids_are_unique(self, sugar):
        items = [build_line_item(sugar, 1) for _ in range(50)]
        assert len({item.id for item in items}) == 50
        assert all(isinstance(item, BillItem) for item in items)


class TestStrategy:
    def test_get_strategy(self):
        assert isinstance(get_strategy("english"), EnglishStrategy)
        assert isinstance(get_strategy("en-IN"), EnglishStrategy)
        assert isinstance(get_strategy(Locale.GUJARATI), GujaratiStrategy)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown locale"):
            get_strategy("hindi")

    def test_quantity_not_gated_by_locale(self):
        text = "two બે"
        assert (
            get_strategy("english").extract_quantity(text)
            == get_strategy("gujarati").extract_quantity(text)
            == 2.0
        )
