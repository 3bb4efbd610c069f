from typing import Iterable, List, Optional

from sqlalchemy import and_, true
from sqlalchemy.orm import Session

from space_app.models.ship import Ship
from space_app.services import filters
from space_app.services.filters import Predicate
from space_app.services.paging import Pagination


def to_clause(predicate: Predicate):
    """Compile a filter value to a SQLAlchemy expression over ``Ship``."""
    if predicate.is_match_all:
        return true()
    column = getattr(Ship, predicate.field)
    if predicate.op == filters.CONTAINS:
        return column.contains(predicate.value, autoescape=True)
    if predicate.op == filters.EQ:
        return column == predicate.value
    if predicate.op == filters.GE:
        return column >= predicate.value
    if predicate.op == filters.LE:
        return column <= predicate.value
    if predicate.op == filters.BETWEEN:
        low, high = predicate.value
        return column.between(low, high)
    raise ValueError(f"Unknown predicate op {predicate.op!r}")


def combine(predicates: Iterable[Predicate]):
    clauses = [to_clause(p) for p in predicates if not p.is_match_all]
    return and_(true(), *clauses)


class ShipRepository:
    """Ship persistence on top of a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def exists_by_id(self, ship_id: int) -> bool:
        return self.db.query(Ship.id).filter(Ship.id == ship_id).first() is not None

    def find_by_id(self, ship_id: int) -> Optional[Ship]:
        return self.db.get(Ship, ship_id)

    def save(self, ship: Ship) -> Ship:
        self.db.add(ship)
        self.db.commit()
        self.db.refresh(ship)
        return ship

    def delete_by_id(self, ship_id: int) -> None:
        ship = self.db.get(Ship, ship_id)
        if ship is not None:
            self.db.delete(ship)
            self.db.commit()

    def find_all(self, predicates: Iterable[Predicate], pagination: Optional[Pagination] = None) -> List[Ship]:
        query = self.db.query(Ship).filter(combine(predicates))
        if pagination is None:
            return query.order_by(Ship.id).all()
        order_column = getattr(Ship, pagination.order.field)
        return (query.order_by(order_column, Ship.id)
                .offset(pagination.offset)
                .limit(pagination.page_size)
                .all())

    def count(self, predicates: Iterable[Predicate]) -> int:
        return self.db.query(Ship).filter(combine(predicates)).count()
