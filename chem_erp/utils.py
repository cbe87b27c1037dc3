from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def safe_div(n: float, d: float) -> float:
    return float(n) / float(d) if d else 0.0


def to_date(value: Any) -> Optional[date]:
    """
    Coerce widget/form values to a calendar date.
    Accepts date, datetime, pandas Timestamp or an ISO string; None stays None.
    Raises ValueError for anything that is not a real date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if hasattr(value, "to_pydatetime"):
        return value.to_pydatetime().date()
    s = str(value).strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        # "2023-06-01T10:30:00" and friends; anything else still raises.
        return datetime.fromisoformat(s).date()


def fmt_money(amount: float, currency: str = "Rs.") -> str:
    return f"{currency} {float(amount):,.2f}"


def fmt_date(d: Optional[date], fmt: str = "%d %b %Y") -> str:
    return d.strftime(fmt) if d else ""
