"""Session calendar — next operation date after a bar.

Weekends only; exchange holidays are not modelled.
"""

from __future__ import annotations

from datetime import date, timedelta


def next_operation_date(d: date) -> date:
    """Return the session following ``d``, skipping the weekend.

    Saturday moves forward 2 days and Sunday 1 day, so Friday → Monday.
    """
    nxt = d + timedelta(days=1)
    if nxt.weekday() == 5:  # Saturday → Monday
        return nxt + timedelta(days=2)
    if nxt.weekday() == 6:  # Sunday → Monday
        return nxt + timedelta(days=1)
    return nxt
