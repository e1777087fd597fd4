"""
Rent calculations derived from frequency-scoped booking totals.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from hostel_core.models.base.enums import BookingFrequency

CENT = Decimal("0.01")
MONTHS_PER_YEAR = 12


def months_spanned(start_date: date, end_date: date) -> int:
    """
    Number of started calendar months between two dates, minimum one.

    2024-01-15 to 2024-04-14 is three months; to 2024-04-15 it is four.
    """
    months = (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)
    if end_date.day >= start_date.day:
        months += 1
    return max(1, months)


def monthly_rent(
    frequency: BookingFrequency,
    total_amount: Decimal,
    start_date: date,
    end_date: date,
) -> Decimal:
    """
    Effective monthly rent of a booking.

    YEARLY totals cover twelve months, MONTHLY totals are already
    monthly, EXCEPTION (custom) totals cover the booked date range.
    """
    total = Decimal(total_amount)
    if frequency == BookingFrequency.YEARLY:
        amount = total / MONTHS_PER_YEAR
    elif frequency == BookingFrequency.MONTHLY:
        amount = total
    else:
        amount = total / months_spanned(start_date, end_date)
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)
