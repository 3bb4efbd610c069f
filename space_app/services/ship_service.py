import logging
import re
from typing import Iterable, List, Optional

from space_app.exceptions import InvalidInput, NotFound
from space_app.models.ship import Ship
from space_app.services.filters import Predicate
from space_app.services.paging import Pagination
from space_app.services.rating import compute_rating
from space_app.services.validation import ValidationMode, validate

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r"[+-]?\d+")
MAX_ID = 2 ** 63 - 1

EDITABLE_FIELDS = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size", "is_used")


def parse_id(raw: Optional[str]) -> int:
    # "0" is refused on its own, before any parsing
    if raw is None or raw == "" or raw == "0":
        raise InvalidInput("Incorrect ID")
    # same digits and range as a signed 64-bit id column
    if not ID_PATTERN.fullmatch(raw):
        raise InvalidInput("ID is not a number")
    ship_id = int(raw)
    if not -MAX_ID - 1 <= ship_id <= MAX_ID:
        raise InvalidInput("ID is not a number")
    return ship_id


def rate(ship: Ship) -> float:
    return compute_rating(ship.speed, ship.is_used, ship.prod_date.year)


class ShipService:
    """Validation, rating and persistence of ships.

    ``repository`` is anything offering exists_by_id, find_by_id, save,
    delete_by_id, find_all and count, e.g. :class:`ShipRepository`.
    """

    def __init__(self, repository):
        self.repository = repository

    def create(self, data) -> Ship:
        try:
            validate(data, ValidationMode.CREATE)
        except InvalidInput as exc:
            logger.warning("Rejected ship create: %s", exc.message)
            raise
        ship = Ship(**{field: getattr(data, field, None) for field in EDITABLE_FIELDS})
        if ship.is_used is None:
            ship.is_used = False
        ship.rating = rate(ship)
        ship = self.repository.save(ship)
        logger.info("Created ship %s with rating %s", ship.id, ship.rating)
        return ship

    def get(self, ship_id: int) -> Ship:
        if not self.repository.exists_by_id(ship_id):
            logger.info("Ship %s not found", ship_id)
            raise NotFound("Ship not found")
        return self.repository.find_by_id(ship_id)

    def edit(self, ship_id: int, data) -> Ship:
        """Overwrite the supplied (non-None) fields of ship ``ship_id``.

        The rating is recomputed from the merged record every time.
        """
        try:
            validate(data, ValidationMode.EDIT)
        except InvalidInput as exc:
            logger.warning("Rejected edit of ship %s: %s", ship_id, exc.message)
            raise
        ship = self.get(ship_id)
        for field in EDITABLE_FIELDS:
            value = getattr(data, field, None)
            if value is not None:
                setattr(ship, field, value)
        ship.rating = rate(ship)
        ship = self.repository.save(ship)
        logger.info("Edited ship %s, rating now %s", ship.id, ship.rating)
        return ship

    def delete(self, ship_id: int) -> None:
        if not self.repository.exists_by_id(ship_id):
            logger.info("Ship %s not found", ship_id)
            raise NotFound("Ship not found")
        self.repository.delete_by_id(ship_id)
        logger.info("Deleted ship %s", ship_id)

    def list(self, predicates: Iterable[Predicate], pagination: Optional[Pagination] = None) -> List[Ship]:
        return self.repository.find_all(list(predicates), pagination)

    def count(self, predicates: Iterable[Predicate]) -> int:
        return self.repository.count(list(predicates))
