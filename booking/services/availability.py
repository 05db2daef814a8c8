from datetime import date
from typing import Iterable


def is_available(bookings: Iterable, check_in: date, check_out: date) -> bool:
    """
    Return True if [check_in, check_out) overlaps none of ``bookings``.

    Stays that touch at the boundary (one checks out the day the other
    checks in) do not overlap. Bookings may come in any order.
    """
    if check_in is None or check_out is None:
        raise ValueError("check_in and check_out are required")

    return all(
        check_out <= booking.check_in or check_in >= booking.check_out
        for booking in bookings
    )
