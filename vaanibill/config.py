"""TOML configuration loader."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .models import Locale

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class BillingConfig:
    locale: Locale = Locale.ENGLISH
    catalog_path: str = "catalog.json"


@dataclass
class CaptureConfig:
    source: str = "stdin"
    lines: list[str] = field(default_factory=list)


@dataclass
class PDFConfig:
    title: str = "VaaniBill"
    output_dir: str = "~/vaanibill/bills"


@dataclass
class VaanibillConfig:
    billing: BillingConfig = field(default_factory=BillingConfig)
    capture: CaptureConfig = field(default_factory=CaptureConfig)
    pdf: PDFConfig = field(default_factory=PDFConfig)


def load_config(path: str | Path | None = None) -> VaanibillConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Locale and catalog path can come from ``VAANIBILL_LOCALE`` and
    ``VAANIBILL_CATALOG`` when the file leaves them unset.

    Raises:
        ValueError: If the configured locale is unknown.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    bil = raw.get("billing", {})
    cap = raw.get("capture", {})
    pdf = raw.get("pdf", {})

    # Resolve settings: config file → environment variable → default
    locale = bil.get("locale", "") or os.environ.get("VAANIBILL_LOCALE", "")
    catalog_path = bil.get("catalog_path", "") or os.environ.get(
        "VAANIBILL_CATALOG", ""
    )

    return VaanibillConfig(
        billing=BillingConfig(
            locale=Locale.parse(locale) if locale else Locale.ENGLISH,
            catalog_path=catalog_path or "catalog.json",
        ),
        capture=CaptureConfig(
            source=cap.get("source", "stdin"),
            lines=list(cap.get("lines", [])),
        ),
        pdf=PDFConfig(
            title=pdf.get("title", "VaaniBill"),
            output_dir=pdf.get("output_dir", "~/vaanibill/bills"),
        ),
    )
