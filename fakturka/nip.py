from __future__ import annotations

from typing import Any

from .errors import InvalidTaxIdError


_NIP_LENGTH = 10
_NIP_WEIGHTS = (6, 5, 7, 2, 3, 4, 5, 6, 7)


def validate_tax_id(value: Any) -> str:
    """Check a Polish NIP and return it as a digit string.

    Raises InvalidTaxIdError when the value is missing, is not exactly ten
    digits, or fails the mod-11 weighted checksum.
    """
    if value is None:
        raise InvalidTaxIdError("Tax id is required")
    digits = str(value)
    if len(digits) != _NIP_LENGTH or not digits.isascii() or not digits.isdigit():
        raise InvalidTaxIdError(f"Tax id must be exactly {_NIP_LENGTH} digits: {digits!r}")

    checksum = sum(int(d) * w for d, w in zip(digits, _NIP_WEIGHTS)) % 11
    if checksum != int(digits[-1]):
        raise InvalidTaxIdError(f"Tax id checksum mismatch: {digits}")
    return digits


def is_valid_tax_id(value: Any) -> bool:
    try:
        validate_tax_id(value)
    except InvalidTaxIdError:
        return False
    return True
