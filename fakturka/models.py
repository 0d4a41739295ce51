from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


_INVOICE_ID_TEMPLATE = "FV-{number}/{month}/{year}"


def build_invoice_id(number: int, month: int, year: int) -> str:
    return _INVOICE_ID_TEMPLATE.format(number=number, month=month, year=year)


class VatTier(str, Enum):
    VAT_23 = "23"
    VAT_8 = "8"
    VAT_5 = "5"
    EXEMPT = "zw"

    @property
    def rate(self) -> Decimal:
        if self is VatTier.EXEMPT:
            return Decimal("0")
        return Decimal(self.value)

    @property
    def label(self) -> str:
        if self is VatTier.EXEMPT:
            return "zw."
        return f"{self.value}%"


class Currency(str, Enum):
    PLN = "PLN"
    EUR = "EUR"
    USD = "USD"


class Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    vat: VatTier
    count: int = Field(default=1, ge=0)
    net_unit_price: Decimal
    nickname: str

    def with_count(self, count: int) -> "Item":
        # model_copy skips validation, so go through the constructor
        return Item(**{**self.model_dump(), "count": count})


class Client(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str
    postcode: str
    city: str = "Warszawa"
    tax_id: Optional[str] = None
    email: Optional[str] = None
    nickname: str
    default_item: Optional[str] = None
    payment_days: int = Field(default=0, ge=0)

    @property
    def pays_cash(self) -> bool:
        return self.payment_days == 0


class Invoice(BaseModel):
    """An issued invoice.

    ``client`` is a snapshot taken at assembly time; later catalog changes do
    not reach it. ``id`` always has the form ``FV-{number}/{month}/{year}``.
    """

    model_config = ConfigDict(frozen=True)

    client: Client
    items: Tuple[Item, ...] = Field(min_length=1)
    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    number: int = Field(gt=0)
    id: str
    payment_days: int = Field(default=0, ge=0)
    currency: Currency = Currency.PLN

    @model_validator(mode="after")
    def _check_date_and_id(self) -> "Invoice":
        # raises ValueError for dates such as 30 February
        date(self.year, self.month, self.day)
        expected = build_invoice_id(self.number, self.month, self.year)
        if self.id != expected:
            raise ValueError(f"Invoice id {self.id!r} does not match {expected!r}")
        return self
