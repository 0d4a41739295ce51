import unittest
from decimal import Decimal

from fakturka.money import format_money, quantize, split_amount, to_decimal


class FormatMoneyTests(unittest.TestCase):
    def test_thousands_and_cents(self) -> None:
        self.assertEqual(format_money(1234.5), "1.234,50")
        self.assertEqual(format_money(Decimal("1234567.891")), "1.234.567,89")
        self.assertEqual(format_money(0), "0,00")
        self.assertEqual(format_money(999), "999,00")

    def test_ties_round_away_from_zero(self) -> None:
        self.assertEqual(format_money("2.675"), "2,68")
        self.assertEqual(format_money("0.005"), "0,01")
        self.assertEqual(quantize("-0.005"), Decimal("-0.01"))

    def test_negative_amounts(self) -> None:
        self.assertEqual(format_money(-1234.5), "-1.234,50")
        self.assertEqual(format_money("-0.001"), "0,00")

    def test_none_is_zero(self) -> None:
        self.assertEqual(to_decimal(None), Decimal("0"))
        self.assertEqual(format_money(None), "0,00")


class SplitAmountTests(unittest.TestCase):
    def test_split(self) -> None:
        self.assertEqual(split_amount(Decimal("246")), (246, 0))
        self.assertEqual(split_amount("1234.505"), (1234, 51))
        self.assertEqual(split_amount("0.994"), (0, 99))
        self.assertEqual(split_amount("0.995"), (1, 0))


if __name__ == "__main__":
    unittest.main()
