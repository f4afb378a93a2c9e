"""Voice and text billing: utterances resolved into priced bill line items."""

from .bill import DraftBill, format_bill_number
from .capture import (
    StaticTranscriptSource,
    StreamTranscriptSource,
    TranscriptSource,
    create_source,
)
from .catalog import load_catalog, parse_catalog
from .config import (
    BillingConfig,
    CaptureConfig,
    PDFConfig,
    VaanibillConfig,
    load_config,
)
from .models import BillItem, Locale, ParseError, ParseResult, Product
from .parsing import build_line_item, match_product, normalize, parse_utterance
from .session import BillingSession

__all__ = [
    "Locale",
    "Product",
    "BillItem",
    "ParseError",
    "ParseResult",
    "parse_utterance",
    "normalize",
    "match_product",
    "build_line_item",
    "DraftBill",
    "format_bill_number",
    "BillingSession",
    "TranscriptSource",
    "StaticTranscriptSource",
    "StreamTranscriptSource",
    "create_source",
    "load_catalog",
    "parse_catalog",
    "VaanibillConfig",
    "BillingConfig",
    "CaptureConfig",
    "PDFConfig",
    "load_config",
]
