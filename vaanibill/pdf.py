"""PDF rendering of draft bills using ReportLab."""

from __future__ import annotations

from pathlib import Path

from .bill import DraftBill

# Font search paths by platform
_FONT_SEARCH_PATHS = [
    # Noto Sans Gujarati (Debian/Ubuntu fonts-noto-core)
    "/usr/share/fonts/truetype/noto/NotoSansGujarati-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSerifGujarati-Regular.ttf",
    # Noto (Fedora/RHEL)
    "/usr/share/fonts/google-noto/NotoSansGujarati-Regular.ttf",
    "/usr/share/fonts/google-noto-vf/NotoSansGujarati[wght].ttf",
    # Lohit Gujarati
    "/usr/share/fonts/truetype/lohit-gujarati/Lohit-Gujarati.ttf",
    "/usr/share/fonts/lohit-gujarati/Lohit-Gujarati.ttf",
    # macOS
    "/System/Library/Fonts/Supplemental/Gujarati Sangam MN.ttc",
    "/Library/Fonts/Arial Unicode.ttf",
]

_FALLBACK_FONT = "Helvetica"


def _find_gujarati_font() -> str:
    """Find a Gujarati-capable font on the system."""
    for path in _FONT_SEARCH_PATHS:
        if Path(path).exists():
            return path
    raise FileNotFoundError(
        "No Gujarati font found. Install one of:\n"
        "  Ubuntu/Debian: sudo apt install fonts-noto-core\n"
        "  Fedora/RHEL:   sudo dnf install google-noto-sans-gujarati-fonts\n"
        "  macOS:         Gujarati Sangam MN ships with the system"
    )


def _register_font(bill: DraftBill, title: str) -> str:
    """Register a Gujarati font with ReportLab and return the font name.

    Falls back to Helvetica when no font is installed and all text is ASCII.
    """
    from reportlab.pdfbase import pdfmetrics
    from reportlab.pdfbase.ttfonts import TTFont

    try:
        font_path = _find_gujarati_font()
    except FileNotFoundError:
        texts = [title, *(item.name for item in bill.items)]
        if all(text.isascii() for text in texts):
            return _FALLBACK_FONT
        raise

    font_name = "GujaratiFont"
    pdfmetrics.registerFont(TTFont(font_name, font_path))
    return font_name


def generate_bill_pdf(
    bill: DraftBill,
    output_path: str | Path,
    title: str = "VaaniBill",
    bill_number: str | None = None,
) -> Path:
    """Generate a PDF file from a draft bill.

    Args:
        bill: The bill to render.
        output_path: Where to save the PDF file.
        title: Heading printed above the table.
        bill_number: Optional number printed under the heading.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
        FileNotFoundError: If the bill needs a Gujarati font and none is found.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required: pip install 'vaanibill[pdf]'"
        )

    font_name = _register_font(bill, title)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "Title_Bill",
        parent=styles["Title"],
        fontName=font_name,
        fontSize=18,
        leading=24,
    )
    subtitle_style = ParagraphStyle(
        "Subtitle_Bill",
        parent=styles["Normal"],
        fontName=font_name,
        fontSize=11,
        leading=15,
        textColor=colors.grey,
    )

    elements: list = []
    elements.append(Paragraph(title, title_style))
    if bill_number:
        elements.append(Paragraph(bill_number, subtitle_style))
    elements.append(Spacer(1, 6 * mm))

    table_data = [["Item", "Qty", "Rate", "Total"]]
    for item in bill.items:
        table_data.append([
            item.name,
            f"{item.quantity:g}",
            f"{item.rate:.2f}",
            f"{item.total:.2f}",
        ])
    table_data.append(["Total", "", "", f"{bill.total:.2f}"])

    table_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4A90D9")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, -1), font_name),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -2), [colors.white, colors.HexColor("#F5F5F5")]),
        ("LINEABOVE", (0, -1), (-1, -1), 1.0, colors.black),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
    ])
    col_widths = [80 * mm, 30 * mm, 35 * mm, 35 * mm]
    t = Table(table_data, colWidths=col_widths)
    t.setStyle(table_style)
    elements.append(t)

    doc.build(elements)
    return output_path
