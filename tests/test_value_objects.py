from decimal import Decimal

import pytest

from bankacct.domain.value_objects import (
    MAX_BALANCE_DIGITS,
    MAX_TRANSFER_DIGITS,
    MONEY_CONTEXT,
    Switch,
    format_amount,
    to_cents,
)


class TestToCents:
    def test_rounds_half_up(self):
        assert to_cents(Decimal("0.005")) == Decimal("0.01")
        assert to_cents(Decimal("2.675")) == Decimal("2.68")

    def test_keeps_whole_amounts(self):
        assert to_cents(Decimal("30")) == Decimal("30.00")

    def test_thirty_digit_amount_is_not_rounded_away(self):
        assert to_cents(Decimal("1" * 30)) == Decimal("1" * 30 + ".00")


class TestMoneyContext:
    def test_largest_sum_is_exact(self):
        balance = Decimal("9" * MAX_BALANCE_DIGITS + ".99")
        amount = Decimal("9" * MAX_TRANSFER_DIGITS + ".00")

        total = MONEY_CONTEXT.add(balance, amount)

        assert MONEY_CONTEXT.subtract(total, amount) == balance
        assert format_amount(total).endswith(".99")


class TestFormatAmount:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("0"), "0.00"),
            (Decimal("7"), "7.00"),
            (Decimal("12.5"), "12.50"),
            (Decimal("99.999"), "100.00"),
            (Decimal("1234567.89"), "1234567.89"),
        ],
    )
    def test_two_decimal_places(self, amount, expected):
        assert format_amount(amount) == expected


class TestSwitch:
    def test_letters(self):
        assert "".join(s.value for s in Switch) == "?DAFHLMSTWIRNP"

    def test_lookup_by_letter(self):
        assert Switch("T") is Switch.TRANSFER
        assert Switch("?") is Switch.HELP

    def test_letters_are_unique(self):
        assert len({s.value for s in Switch}) == len(Switch)
