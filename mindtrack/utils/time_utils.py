"""
Time and rounding helpers shared by providers and builders
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from mindtrack.config.database import DB_TIME_FORMAT


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through"""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def to_db_time(value: datetime) -> str:
    return to_local_naive(value).strftime(DB_TIME_FORMAT)


def from_db_time(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a stored timestamp

    Accepts the canonical format as well as ISO strings with a 'T' separator
    or fractional seconds.
    """
    if not value:
        return None
    try:
        return datetime.strptime(value, DB_TIME_FORMAT)
    except ValueError:
        return datetime.fromisoformat(value)


def round_half_up(value: Union[int, float], digits: int = 0) -> Union[int, float]:
    """
    Round half away from zero for positives (2.5 -> 3, 0.25 -> 0.3)

    Returns an int when digits == 0.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)
