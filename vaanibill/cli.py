"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

from .bill import DraftBill, format_bill_number
from .capture import create_source
from .catalog import load_catalog
from .config import load_config
from .models import BillItem, Locale
from .parsing import parse_utterance
from .session import BillingSession


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="vaanibill",
        description="Voice billing: turn phrases like 'two kg sugar' into bill lines",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Parse a single utterance")
    parse_parser.add_argument("text", nargs="+", help="Utterance text")
    _add_session_arguments(parse_parser)

    # bill
    bill_parser = sub.add_parser(
        "bill", help="Build a bill from utterances read line by line"
    )
    _add_session_arguments(bill_parser)
    bill_parser.add_argument(
        "--pdf", type=str, nargs="?", const="", default=None, metavar="FILE",
        help="Write the bill to a PDF file; relative paths go under [pdf] output_dir",
    )
    bill_parser.add_argument(
        "--sequence", type=int, default=None, metavar="N",
        help="Print bill number BILL<ddmmyy>_N on the PDF (and name the file after it)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        config = load_config(args.config)
        locale = Locale.parse(args.locale) if args.locale else config.billing.locale
        catalog = load_catalog(args.catalog or config.billing.catalog_path)
    except (ValueError, FileNotFoundError) as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    match args.command:
        case "parse":
            _cmd_parse(" ".join(args.text), locale, catalog, args)
        case "bill":
            asyncio.run(_cmd_bill(config, locale, catalog, args))


def _add_session_arguments(sub_parser: argparse.ArgumentParser) -> None:
    sub_parser.add_argument(
        "--locale", "-l", type=str, default=None,
        help="english or gujarati (default from config)",
    )
    sub_parser.add_argument(
        "--catalog", type=str, default=None, metavar="FILE",
        help="Catalog JSON snapshot (default from config)",
    )
    sub_parser.add_argument("--json", action="store_true", help="Output JSON")


def _item_dict(item: BillItem) -> dict:
    return {
        "name": item.name,
        "rate": item.rate,
        "quantity": item.quantity,
        "total": item.total,
    }


def _cmd_parse(text, locale, catalog, args) -> None:
    result = parse_utterance(text, locale, catalog)

    if args.json:
        data = {
            "ok": result.ok,
            "quantity": result.quantity,
            "name": result.name,
            "item": _item_dict(result.item) if result.ok else None,
            "error": result.error.name if result.error else None,
            "message": result.message,
        }
        print(json.dumps(data, ensure_ascii=False, indent=2))
    elif result.ok:
        item = result.item
        print(f"{item.name} x {item.quantity:g} @ {item.rate:.2f} = {item.total:.2f}")
    else:
        print(result.message, file=sys.stderr)

    if not result.ok:
        sys.exit(1)


async def _cmd_bill(config, locale, catalog, args) -> None:
    session = BillingSession(catalog, locale)
    source = create_source(config)
    results = await session.listen(source)

    for result in results:
        if not result.ok:
            print(f"{result.name or '?'}: {result.message}", file=sys.stderr)

    bill: DraftBill = session.bill
    if args.json:
        data = bill.to_payload() if bill else {"items": [], "total": 0.0}
        print(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        print(bill.display())

    if args.pdf is None:
        return
    if not bill:
        print("Add at least one item before completing the bill.", file=sys.stderr)
        return

    from .pdf import generate_bill_pdf

    try:
        bill_number = None
        if args.sequence is not None:
            bill_number = format_bill_number(date.today(), args.sequence)
        pdf_path = generate_bill_pdf(
            bill,
            _resolve_pdf_path(config, args.pdf, bill_number),
            title=config.pdf.title,
            bill_number=bill_number,
        )
        print(f"PDF saved: {pdf_path}")
    except (ImportError, FileNotFoundError, ValueError) as e:
        print(f"PDF error: {e}", file=sys.stderr)


def _resolve_pdf_path(config, pdf_arg: str, bill_number: str | None) -> Path:
    """Place relative PDF paths under the configured output directory.

    An empty ``pdf_arg`` (bare ``--pdf``) names the file after the bill
    number, or ``bill.pdf`` without one.
    """
    path = Path(pdf_arg or f"{bill_number or 'bill'}.pdf").expanduser()
    if path.is_absolute():
        return path
    return Path(config.pdf.output_dir).expanduser() / path
