import pytest

from fakturka.errors import InvalidTaxIdError
from fakturka.nip import is_valid_tax_id, validate_tax_id


@pytest.mark.parametrize("nip", ["5260250995", "1111111111", "1234563218"])
def test_valid_checksums(nip: str) -> None:
    assert validate_tax_id(nip) == nip
    assert is_valid_tax_id(nip)


def test_flipping_last_digit_invalidates() -> None:
    assert is_valid_tax_id("1111111111")
    assert not is_valid_tax_id("1111111112")
    with pytest.raises(InvalidTaxIdError):
        validate_tax_id("5260250994")


def test_integer_input_is_rendered_as_digits() -> None:
    assert validate_tax_id(5260250995) == "5260250995"


@pytest.mark.parametrize("nip", ["", "123", "12345678901", "52602509x5", "526-025-09-95", None])
def test_rejects_malformed(nip) -> None:
    with pytest.raises(InvalidTaxIdError):
        validate_tax_id(nip)


def test_checksum_of_ten_never_validates() -> None:
    # weighted sum of 123456789 is 230, and 230 % 11 == 10
    for last in "0123456789":
        assert not is_valid_tax_id("123456789" + last)
