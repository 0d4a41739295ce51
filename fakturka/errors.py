from __future__ import annotations


class InvoicingError(ValueError):
    pass


class DuplicateKeyError(InvoicingError):
    pass


class InvalidTaxIdError(InvoicingError):
    pass


class DuplicateIdError(InvoicingError):
    pass


class MalformedItemListError(InvoicingError):
    pass


class CompilationError(InvoicingError):
    def __init__(self, message: str, returncode: int) -> None:
        super().__init__(message)
        self.returncode = returncode


class InvalidInvoiceError(InvoicingError):
    pass
