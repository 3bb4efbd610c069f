"""Per-dimension filter values for ship listings.

Each ``filter_by_*`` builder returns one :class:`Predicate` over a single ship
column, or :data:`MATCH_ALL` when its inputs are absent. Combining them is left
to the storage layer.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional

from space_app.models.ship import ShipType

ALL = "all"
CONTAINS = "contains"
EQ = "eq"
GE = "ge"
LE = "le"
BETWEEN = "between"


@dataclass(frozen=True)
class Predicate:
    field: Optional[str] = None
    op: str = ALL
    value: Any = None

    @property
    def is_match_all(self) -> bool:
        return self.op == ALL


MATCH_ALL = Predicate()


def from_epoch_millis(millis: int) -> datetime:
    """Naive local datetime for a millisecond timestamp.

    Raises ValueError when the timestamp falls outside what ``datetime`` can hold.
    """
    seconds, rest = divmod(millis, 1000)
    try:
        return datetime.fromtimestamp(seconds) + timedelta(milliseconds=rest)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"Timestamp {millis} is out of range") from exc


def to_epoch_millis(moment: datetime) -> int:
    return round(moment.timestamp() * 1000)


def _range(field: str, low, high) -> Predicate:
    if low is None and high is None:
        return MATCH_ALL
    if low is None:
        return Predicate(field, LE, high)
    if high is None:
        return Predicate(field, GE, low)
    return Predicate(field, BETWEEN, (low, high))


def filter_by_name(name: Optional[str]) -> Predicate:
    return MATCH_ALL if name is None else Predicate("name", CONTAINS, name)


def filter_by_planet(planet: Optional[str]) -> Predicate:
    return MATCH_ALL if planet is None else Predicate("planet", CONTAINS, planet)


def filter_by_ship_type(ship_type: Optional[ShipType]) -> Predicate:
    return MATCH_ALL if ship_type is None else Predicate("ship_type", EQ, ShipType(ship_type))


def filter_by_usage(is_used: Optional[bool]) -> Predicate:
    return MATCH_ALL if is_used is None else Predicate("is_used", EQ, bool(is_used))


def date_range_upper_bound(before: int) -> datetime:
    # Only the hour within the half-day is reset: 15:40 becomes 12:00, not 00:00.
    moment = from_epoch_millis(before)
    moment = moment.replace(hour=moment.hour - moment.hour % 12, minute=0, second=0, microsecond=0)
    return moment - timedelta(seconds=1)


def filter_by_date(after: Optional[int], before: Optional[int]) -> Predicate:
    """Production date window, ``after`` and ``before`` in epoch milliseconds.

    With a single bound the comparison is inclusive against the raw timestamp.
    With both, the upper end is pulled back by :func:`date_range_upper_bound`.
    """
    if after is None and before is None:
        return MATCH_ALL
    if after is None:
        return Predicate("prod_date", LE, from_epoch_millis(before))
    if before is None:
        return Predicate("prod_date", GE, from_epoch_millis(after))
    return Predicate("prod_date", BETWEEN, (from_epoch_millis(after), date_range_upper_bound(before)))


def filter_by_speed(min_speed: Optional[float], max_speed: Optional[float]) -> Predicate:
    return _range("speed", min_speed, max_speed)


def filter_by_crew_size(min_crew_size: Optional[int], max_crew_size: Optional[int]) -> Predicate:
    return _range("crew_size", min_crew_size, max_crew_size)


def filter_by_rating(min_rating: Optional[float], max_rating: Optional[float]) -> Predicate:
    return _range("rating", min_rating, max_rating)
