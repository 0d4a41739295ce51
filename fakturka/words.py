from __future__ import annotations

from num2words import num2words

from .models import Currency


_WORDS_LANG = "pl"

# singular, few (2-4), many
_CURRENCY_NOUNS: dict[Currency, tuple[str, str, str]] = {
    Currency.PLN: ("złoty", "złote", "złotych"),
    Currency.EUR: ("euro", "euro", "euro"),
    Currency.USD: ("dolar", "dolary", "dolarów"),
}


def cardinal_words(number: int) -> str:
    if number < 0:
        raise ValueError("Only non-negative amounts can be spelled out")
    return num2words(number, lang=_WORDS_LANG)


def currency_noun(number: int, currency: Currency) -> str:
    # No teen case: 12-14 take the "few" form.
    singular, few, many = _CURRENCY_NOUNS[currency]
    ones = number % 10
    tens = (number // 10) % 10
    if tens == 0 and ones == 1:
        return singular
    if ones in (2, 3, 4):
        return few
    return many


def amount_in_words(number: int, currency: Currency = Currency.PLN) -> str:
    return f"{cardinal_words(number)} {currency_noun(number, currency)}"
