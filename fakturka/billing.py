from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from .data import Database
from .models import Invoice

logger = logging.getLogger(__name__)


def _already_billed(db: Database, nickname: str, month: int, year: int) -> bool:
    return any(
        inv.client.nickname == nickname and inv.month == month and inv.year == year
        for inv in db.invoices
    )


def bill_monthly(db: Database, today: Optional[date] = None) -> List[Invoice]:
    """Issue this month's invoice for every client with a default item.

    Clients that already have an invoice dated this month are skipped, so
    running it twice in one month issues nothing new. The caller saves.
    """
    today = today or date.today()
    issued: List[Invoice] = []

    for client in db.clients:
        if not client.default_item:
            continue
        if _already_billed(db, client.nickname, today.month, today.year):
            logger.info("billing.skip client=%s reason=already-billed", client.nickname)
            continue
        item = db.item(client.default_item)
        if item is None:
            logger.warning(
                "billing.skip client=%s reason=unknown-item item=%s",
                client.nickname,
                client.default_item,
            )
            continue
        invoice = db.issue_invoice(client, [item], today=today)
        issued.append(invoice)

    logger.info("billing.done month=%d year=%d issued=%d", today.month, today.year, len(issued))
    return issued
