from __future__ import annotations

from datetime import date

from fakturka.billing import bill_monthly
from fakturka.data import Database
from fakturka.models import Client


def test_bills_clients_with_default_item_once_per_month(db: Database, acme: Client) -> None:
    walk_in = acme.model_copy(update={"nickname": "walkin", "default_item": None})
    db.add_to_db(walk_in)

    issued = bill_monthly(db, today=date(2024, 3, 1))
    assert [inv.client.nickname for inv in issued] == ["acme"]
    assert issued[0].id == "FV-1/3/2024"
    assert issued[0].items[0].nickname == "hosting"
    assert issued[0].payment_days == 14

    assert bill_monthly(db, today=date(2024, 3, 28)) == []
    assert [inv.id for inv in bill_monthly(db, today=date(2024, 4, 1))] == ["FV-1/4/2024"]


def test_unknown_default_item_is_skipped(db: Database, acme: Client) -> None:
    orphan = acme.model_copy(update={"nickname": "orphan", "default_item": "gone"})
    db.add_to_db(orphan)

    issued = bill_monthly(db, today=date(2024, 5, 2))
    assert [inv.client.nickname for inv in issued] == ["acme"]
    assert len(db.invoices) == 1
