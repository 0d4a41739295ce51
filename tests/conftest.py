from __future__ import annotations

from decimal import Decimal
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fakturka.data import Database  # noqa: E402
from fakturka.models import Client, Item, VatTier  # noqa: E402

VALID_NIP = "5260250995"


@pytest.fixture()
def hosting() -> Item:
    return Item(
        title="Hosting",
        vat=VatTier.VAT_23,
        count=1,
        net_unit_price=Decimal("100.00"),
        nickname="hosting",
    )


@pytest.fixture()
def training() -> Item:
    return Item(
        title="Szkolenie",
        vat=VatTier.EXEMPT,
        count=1,
        net_unit_price=Decimal("50.00"),
        nickname="training",
    )


@pytest.fixture()
def acme(hosting: Item) -> Client:
    return Client(
        name="ACME Sp. z o.o.",
        address="ul. Prosta 1",
        postcode="00-001",
        tax_id=VALID_NIP,
        email="biuro@acme.example",
        nickname="acme",
        default_item=hosting.nickname,
        payment_days=14,
    )


@pytest.fixture()
def db(hosting: Item, training: Item, acme: Client) -> Database:
    database = Database()
    database.add_to_db(hosting)
    database.add_to_db(training)
    database.add_to_db(acme)
    return database
