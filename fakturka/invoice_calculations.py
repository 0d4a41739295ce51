from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from .models import Invoice, VatTier
from .money import format_money, split_amount
from .words import amount_in_words


CASH_LABEL = "gotówka"
_HUNDRED = Decimal("100")
_TAXED_TIERS = (VatTier.VAT_23, VatTier.VAT_8, VatTier.VAT_5)


@dataclass
class TierTotals:
    net: Decimal = Decimal("0")
    vat: Decimal = Decimal("0")
    gross: Decimal = Decimal("0")

    def add(self, net: Decimal, vat: Decimal, gross: Decimal) -> None:
        self.net += net
        self.vat += vat
        self.gross += gross

    def formatted(self) -> Dict[str, str]:
        return {
            "net": format_money(self.net),
            "vat": format_money(self.vat),
            "gross": format_money(self.gross),
        }


@dataclass(frozen=True)
class LineFields:
    position: int
    title: str
    unit_net: str
    count: int
    net: str
    vat_label: str
    vat: str
    gross: str


@dataclass(frozen=True)
class InvoiceFields:
    issue_date: str
    net_total: Decimal
    vat_total: Decimal
    gross_total: Decimal
    net: str
    vat: str
    gross: str
    gross_integer: int
    gross_cents: int
    gross_words: str
    due: str
    exempt_net: str
    tiers: Dict[str, Dict[str, str]] = field(default_factory=dict)
    lines: List[LineFields] = field(default_factory=list)


def invoice_date(invoice: Invoice) -> date:
    return date(invoice.year, invoice.month, invoice.day)


def due_date(invoice: Invoice) -> Optional[date]:
    if invoice.payment_days == 0:
        return None
    return invoice_date(invoice) + timedelta(days=invoice.payment_days)


def due_label(invoice: Invoice) -> str:
    due = due_date(invoice)
    if due is None:
        return CASH_LABEL
    return f"{due.isoformat()} ({invoice.payment_days} dni)"


def compute_invoice_fields(invoice: Invoice) -> InvoiceFields:
    """Compute the totals, per-tier sums and line records of ``invoice``."""
    tiers = {tier: TierTotals() for tier in _TAXED_TIERS}
    exempt_net = Decimal("0")
    lines: List[LineFields] = []

    for position, item in enumerate(invoice.items, start=1):
        rate = item.vat.rate
        line_net = item.count * item.net_unit_price
        line_vat = line_net * rate / _HUNDRED
        line_gross = line_net * (1 + rate / _HUNDRED)

        if item.vat is VatTier.EXEMPT:
            exempt_net += line_net
        else:
            tiers[item.vat].add(line_net, line_vat, line_gross)

        lines.append(
            LineFields(
                position=position,
                title=item.title,
                unit_net=format_money(item.net_unit_price),
                count=item.count,
                net=format_money(line_net),
                vat_label=item.vat.label,
                vat=format_money(line_vat),
                gross=format_money(line_gross),
            )
        )

    net_total = sum((t.net for t in tiers.values()), exempt_net)
    vat_total = sum((t.vat for t in tiers.values()), Decimal("0"))
    gross_total = sum((t.gross for t in tiers.values()), exempt_net)
    gross_integer, gross_cents = split_amount(gross_total)

    return InvoiceFields(
        issue_date=invoice_date(invoice).isoformat(),
        net_total=net_total,
        vat_total=vat_total,
        gross_total=gross_total,
        net=format_money(net_total),
        vat=format_money(vat_total),
        gross=format_money(gross_total),
        gross_integer=gross_integer,
        gross_cents=gross_cents,
        gross_words=amount_in_words(gross_integer, invoice.currency),
        due=due_label(invoice),
        exempt_net=format_money(exempt_net),
        tiers={tier.value: totals.formatted() for tier, totals in tiers.items()},
        lines=lines,
    )
