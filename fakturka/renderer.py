from __future__ import annotations

from dataclasses import asdict
from typing import Any, Protocol

from .invoice_calculations import compute_invoice_fields
from .invoice_numbering import invoice_filename
from .models import Invoice
from .settings import CompanyProfile


class InvoiceRenderer(Protocol):
    def render(self, context: dict[str, Any]) -> str:
        ...


def _seller_fields(profile: CompanyProfile, invoice: Invoice) -> dict[str, Any]:
    return {
        "name": profile.name,
        "address": profile.address,
        "postcode": profile.postcode,
        "city": profile.city,
        "tax_id": profile.tax_id,
        "email": profile.email,
        "account": profile.account_for(invoice.currency),
    }


def _buyer_fields(invoice: Invoice) -> dict[str, Any]:
    client = invoice.client
    return {
        "name": client.name,
        "address": client.address,
        "postcode": client.postcode,
        "city": client.city,
        "tax_id": client.tax_id or "",
        "email": client.email or "",
    }


def build_document_context(invoice: Invoice, profile: CompanyProfile) -> dict[str, Any]:
    """Everything a template needs to lay out ``invoice``."""
    return {
        "invoice": {
            "id": invoice.id,
            "number": invoice.number,
            "year": invoice.year,
            "month": invoice.month,
            "day": invoice.day,
            "currency": invoice.currency.value,
            "payment_days": invoice.payment_days,
        },
        "seller": _seller_fields(profile, invoice),
        "buyer": _buyer_fields(invoice),
        "fields": asdict(compute_invoice_fields(invoice)),
        "filename": invoice_filename(invoice),
    }


def render_invoice(invoice: Invoice, profile: CompanyProfile, renderer: InvoiceRenderer) -> str:
    return renderer.render(build_document_context(invoice, profile))
