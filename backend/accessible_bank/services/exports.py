from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from decimal import Decimal
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Table, TableStyle
from sqlalchemy.orm import Session

from accessible_bank.core.errors import InvalidFormat
from accessible_bank.models.transaction import Transaction
from accessible_bank.services.transactions import TxFilters, all_transactions, source_currencies

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "pdf")
CSV_HEADER = ["Id", "FromAccountId", "ToAccountId", "Amount", "Currency", "Date", "Description", "Category"]
PDF_HEADER = ["From -> To", "Amount & Currency", "Date", "Category / Description"]


@dataclass
class ExportFile:
    content: bytes
    media_type: str
    filename: str


def normalize_format(fmt: str | None) -> str:
    f = (fmt or "").strip().lower()
    if f not in EXPORT_FORMATS:
        raise InvalidFormat()
    return f


def _money(v) -> str:
    return f"{Decimal(v):.2f}"


def render_csv(txs: list[Transaction], currencies: dict[int, str]) -> bytes:
    buf = io.StringIO()
    w = csv.writer(buf, delimiter=";", lineterminator="\n")
    w.writerow(CSV_HEADER)
    for t in txs:
        w.writerow(
            [
                t.id,
                t.from_account_id,
                t.to_account_id,
                _money(t.amount),
                currencies.get(t.from_account_id, "N/A"),
                t.date.strftime("%Y-%m-%d %H:%M:%S"),
                t.description or "",
                t.category or "",
            ]
        )
    return buf.getvalue().encode("utf-8")


def render_pdf(txs: list[Transaction], currencies: dict[int, str]) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=30,
        rightMargin=30,
        topMargin=30,
        bottomMargin=30,
        title="Transaction Report",
    )

    styles = getSampleStyleSheet()
    title = ParagraphStyle(
        "ReportTitle",
        parent=styles["Title"],
        fontName="Helvetica-Bold",
        fontSize=20,
        leading=24,
        alignment=TA_CENTER,
        spaceAfter=12,
    )
    cell = ParagraphStyle("Cell", parent=styles["BodyText"], fontSize=10, leading=12)

    data: list[list] = [PDF_HEADER]
    for t in txs:
        cur = currencies.get(t.from_account_id, "N/A")
        data.append(
            [
                f"{t.from_account_id} -> {t.to_account_id}",
                f"{_money(t.amount)} {cur}",
                t.date.strftime("%Y-%m-%d"),
                Paragraph(escape(f"{t.category or ''} / {t.description or ''}"), cell),
            ]
        )

    width = A4[0] - 60
    table = Table(data, colWidths=[width / 4] * 4, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("TOPPADDING", (0, 0), (-1, -1), 5),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                ("LEFTPADDING", (0, 0), (-1, -1), 5),
                ("RIGHTPADDING", (0, 0), (-1, -1), 5),
                ("LINEBELOW", (0, 0), (-1, -1), 1, colors.HexColor("#E0E0E0")),
            ]
        )
    )

    doc.build([Paragraph("Transaction Report", title), table])
    return buf.getvalue()


def export_transactions(s: Session, owner_id: int, f: TxFilters, fmt: str) -> ExportFile:
    """Render every transaction matching ``f`` (no paging) as CSV or PDF."""
    kind = normalize_format(fmt)
    txs = all_transactions(s, owner_id, f)
    currencies = source_currencies(s, txs)
    logger.info("export: owner=%s format=%s rows=%s", owner_id, kind, len(txs))
    if kind == "csv":
        return ExportFile(render_csv(txs, currencies), "text/csv", "transactions.csv")
    return ExportFile(render_pdf(txs, currencies), "application/pdf", "transactions.pdf")
