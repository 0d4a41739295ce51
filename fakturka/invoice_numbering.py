from __future__ import annotations

import logging
import os
import re
from collections.abc import Sequence
from datetime import date
from typing import Any, Iterable, Optional

from .errors import MalformedItemListError
from .models import Client, Currency, Invoice, Item, build_invoice_id

logger = logging.getLogger(__name__)


def _sanitize_filename(value: str) -> str:
    cleaned = value.strip().replace("/", "-").replace(os.sep, "-")
    cleaned = re.sub(r"[^\w.\-]+", "_", cleaned, flags=re.UNICODE)
    return cleaned or "faktura"


def next_number(invoices: Iterable[Invoice], month: int, year: int) -> int:
    numbers = [inv.number for inv in invoices if inv.month == month and inv.year == year]
    return max(numbers, default=0) + 1


def _check_items(items: Any) -> tuple[Item, ...]:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise MalformedItemListError("Invoice items must be a sequence of items")
    if not items:
        raise MalformedItemListError("Invoice needs at least one item")
    for position, entry in enumerate(items, start=1):
        if not isinstance(entry, Item):
            raise MalformedItemListError(
                f"Invoice line {position} is not an item record: {entry!r}"
            )
    return tuple(items)


def assemble_invoice(
    invoices: Iterable[Invoice],
    client: Client,
    items: Sequence[Item],
    *,
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    number: Optional[int] = None,
    payment_days: Optional[int] = None,
    currency: Currency = Currency.PLN,
    today: Optional[date] = None,
) -> Invoice:
    """Build an invoice for ``client`` without admitting it anywhere.

    Missing date parts come from ``today`` (the calendar date by default) and
    a missing ``number`` continues the sequence of its (month, year) bucket
    in ``invoices``.
    """
    lines = _check_items(items)

    today = today or date.today()
    year = today.year if year is None else year
    month = today.month if month is None else month
    day = today.day if day is None else day
    if number is None:
        number = next_number(invoices, month, year)

    invoice = Invoice(
        client=client.model_copy(deep=True),
        items=lines,
        year=year,
        month=month,
        day=day,
        number=number,
        id=build_invoice_id(number, month, year),
        payment_days=client.payment_days if payment_days is None else payment_days,
        currency=currency,
    )
    logger.debug("invoice.assembled id=%s client=%s lines=%d", invoice.id, client.nickname, len(lines))
    return invoice


def invoice_filename(invoice: Invoice, extension: str = "pdf") -> str:
    filename = _sanitize_filename(invoice.id)
    suffix = f".{extension.lstrip('.')}"
    if not filename.lower().endswith(suffix):
        filename = f"{filename}{suffix}"
    return filename
