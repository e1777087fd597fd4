"""Tests for bed labels and rent arithmetic."""
from datetime import date
from decimal import Decimal

import pytest

from hostel_core.models.base.enums import BookingFrequency
from hostel_core.utils.bed_labels import index_for_label, label_for_index, next_label_indexes
from hostel_core.utils.rent import monthly_rent, months_spanned


@pytest.mark.parametrize(
    "index, label",
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (51, "AZ"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
)
def test_label_sequence(index, label):
    assert label_for_index(index) == label
    assert index_for_label(label) == index


@pytest.mark.parametrize("bad", ["", "a", "A1", "Ä"])
def test_index_for_invalid_label(bad):
    with pytest.raises(ValueError):
        index_for_label(bad)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        label_for_index(-1)


def test_next_label_indexes_continue_after_highest():
    assert next_label_indexes([], 3) == [0, 1, 2]
    assert next_label_indexes([0, 2], 2) == [3, 4]
    assert next_label_indexes([4], 0) == []


@pytest.mark.parametrize(
    "start, end, months",
    [
        (date(2024, 1, 1), date(2024, 12, 31), 12),
        (date(2024, 1, 15), date(2024, 4, 14), 3),
        (date(2024, 1, 15), date(2024, 4, 15), 4),
        (date(2024, 3, 10), date(2024, 3, 10), 1),
        (date(2024, 11, 1), date(2025, 2, 28), 4),
    ],
)
def test_months_spanned(start, end, months):
    assert months_spanned(start, end) == months


class TestMonthlyRent:
    start = date(2024, 1, 1)
    end = date(2024, 12, 31)

    def test_yearly_is_divided_by_twelve(self):
        assert monthly_rent(BookingFrequency.YEARLY, Decimal("60000"), self.start, self.end) == Decimal("5000.00")

    def test_monthly_is_unchanged(self):
        assert monthly_rent(BookingFrequency.MONTHLY, Decimal("4500"), self.start, self.end) == Decimal("4500.00")

    def test_custom_period_uses_date_range(self):
        rent = monthly_rent(
            BookingFrequency.EXCEPTION, Decimal("10000"), date(2024, 1, 15), date(2024, 4, 14)
        )
        assert rent == Decimal("3333.33")

    def test_rounds_half_up(self):
        assert monthly_rent(BookingFrequency.YEARLY, Decimal("100.02"), self.start, self.end) == Decimal("8.34")
