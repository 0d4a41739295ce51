from __future__ import annotations

import logging
import os
import tempfile
import threading
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from .errors import DuplicateIdError, DuplicateKeyError, InvalidInvoiceError
from .invoice_numbering import assemble_invoice, next_number
from .models import Client, Currency, Invoice, Item
from .nip import validate_tax_id

logger = logging.getLogger(__name__)

Entry = Union[Item, Client, Invoice]
_T = TypeVar("_T", Item, Client)


class Snapshot(BaseModel):
    items: List[Item] = Field(default_factory=list)
    clients: List[Client] = Field(default_factory=list)
    invoices: List[Invoice] = Field(default_factory=list)


def lookup_by_nickname(collection: Iterable[_T], nickname: str) -> Optional[_T]:
    for entry in collection:
        if entry.nickname == nickname:
            return entry
    return None


class Database:
    """Items, clients and invoices of one user, persisted as a single file.

    Nothing here is ever updated or deleted: entries are admitted once through
    :meth:`add_to_db` and ``save`` rewrites the whole file.
    """

    def __init__(self, snapshot: Optional[Snapshot] = None) -> None:
        snapshot = snapshot or Snapshot()
        self.items: List[Item] = list(snapshot.items)
        self.clients: List[Client] = list(snapshot.clients)
        self.invoices: List[Invoice] = list(snapshot.invoices)
        self._numbering_lock = threading.Lock()

    # --- persistence ---

    def snapshot(self) -> Snapshot:
        return Snapshot(items=self.items, clients=self.clients, invoices=self.invoices)

    def replace(self, snapshot: Snapshot) -> None:
        self.items = list(snapshot.items)
        self.clients = list(snapshot.clients)
        self.invoices = list(snapshot.invoices)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Database":
        db = cls()
        db.reload(path)
        return db

    def reload(self, path: Union[str, Path]) -> None:
        path = Path(path)
        if not path.exists():
            logger.info("db.create path=%s", path)
            self.replace(Snapshot())
            self.save(path)
            return
        self.replace(Snapshot.model_validate_json(path.read_text(encoding="utf-8")))
        logger.info(
            "db.load path=%s items=%d clients=%d invoices=%d",
            path,
            len(self.items),
            len(self.clients),
            len(self.invoices),
        )

    def save(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = self.snapshot().model_dump_json(indent=2) + "\n"
        # write beside the target, then swap it in
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.info("db.save path=%s invoices=%d", path, len(self.invoices))

    # --- catalog ---

    def item(self, nickname: str) -> Optional[Item]:
        return lookup_by_nickname(self.items, nickname)

    def client(self, nickname: str) -> Optional[Client]:
        return lookup_by_nickname(self.clients, nickname)

    def invoice(self, invoice_id: str) -> Optional[Invoice]:
        for invoice in self.invoices:
            if invoice.id == invoice_id:
                return invoice
        return None

    def add_to_db(self, entry: Entry, *, skip_tax_id_check: bool = False) -> Entry:
        if isinstance(entry, Item):
            return self._add_item(entry)
        if isinstance(entry, Client):
            return self._add_client(entry, skip_tax_id_check=skip_tax_id_check)
        if isinstance(entry, Invoice):
            return self._add_invoice(entry)
        raise TypeError(f"Unsupported entry type: {type(entry).__name__}")

    def _check_nickname(self, collection: Sequence[_T], entry: _T, kind: str) -> None:
        if not entry.nickname or not entry.nickname.strip():
            logger.warning("db.reject kind=%s reason=empty-nickname", kind)
            raise DuplicateKeyError(f"{kind} nickname must not be empty")
        if lookup_by_nickname(collection, entry.nickname) is not None:
            logger.warning("db.reject kind=%s nickname=%s reason=duplicate", kind, entry.nickname)
            raise DuplicateKeyError(f"{kind} with nickname {entry.nickname!r} already exists")

    def _add_item(self, item: Item) -> Item:
        self._check_nickname(self.items, item, "Item")
        self.items.append(item)
        logger.info("db.add item=%s", item.nickname)
        return item

    def _add_client(self, client: Client, *, skip_tax_id_check: bool) -> Client:
        self._check_nickname(self.clients, client, "Client")
        if not skip_tax_id_check:
            validate_tax_id(client.tax_id)
        self.clients.append(client)
        logger.info("db.add client=%s", client.nickname)
        return client

    def _add_invoice(self, invoice: Invoice) -> Invoice:
        if not invoice.id or not invoice.id.strip():
            logger.warning("db.reject invoice=%r reason=empty-id", invoice.id)
            raise DuplicateIdError("Invoice id must not be empty")
        try:
            # model_copy(update=...) skips validation, so check again here
            Invoice.model_validate(invoice.model_dump())
        except ValidationError as exc:
            logger.warning("db.reject invoice=%s reason=invalid", invoice.id)
            raise InvalidInvoiceError(f"Invoice {invoice.id!r} is inconsistent: {exc}") from exc
        if self.invoice(invoice.id) is not None:
            logger.warning("db.reject invoice=%s reason=duplicate", invoice.id)
            raise DuplicateIdError(f"Invoice {invoice.id!r} already exists")
        self.invoices.append(invoice)
        logger.info("db.add invoice=%s client=%s", invoice.id, invoice.client.nickname)
        return invoice

    # --- invoicing ---

    def next_number(self, month: int, year: int) -> int:
        return next_number(self.invoices, month, year)

    def issue_invoice(
        self,
        client: Client,
        items: Sequence[Item],
        *,
        currency: Currency = Currency.PLN,
        payment_days: Optional[int] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        number: Optional[int] = None,
        today: Optional[date] = None,
    ) -> Invoice:
        """Number, assemble and admit an invoice in one step.

        The lock makes numbering and admission atomic within this process.
        Two processes working on copies of the same file can still hand out
        the same number; the second save then overwrites the first.
        """
        with self._numbering_lock:
            invoice = assemble_invoice(
                self.invoices,
                client,
                items,
                currency=currency,
                payment_days=payment_days,
                year=year,
                month=month,
                day=day,
                number=number,
                today=today,
            )
            return self._add_invoice(invoice)
