import enum

from space_app.exceptions import InvalidInput

NAME_MAX_LENGTH = 50
CREW_SIZE_RANGE = (1, 9999)
SPEED_RANGE = (0.01, 0.99)
PROD_YEAR_RANGE = (2800, 3019)

REQUIRED_FIELDS = ("name", "planet", "ship_type", "prod_date", "speed", "crew_size")


class ValidationMode(str, enum.Enum):
    CREATE = "create"
    EDIT = "edit"


def validate(ship, mode: ValidationMode) -> None:
    """Check ``ship`` field by field and raise InvalidInput on the first violation.

    ``ship`` is any object with the ship attributes; absent fields are None.
    In CREATE mode every required field must be present, in EDIT mode only the
    supplied ones are range-checked.
    """
    if mode == ValidationMode.CREATE:
        for field in REQUIRED_FIELDS:
            if getattr(ship, field, None) is None:
                raise InvalidInput(f"Missing Ship.{field}")

    for field in ("name", "planet"):
        value = getattr(ship, field, None)
        if value is not None and not 1 <= len(value) <= NAME_MAX_LENGTH:
            raise InvalidInput(f"Incorrect Ship.{field}")

    crew_size = getattr(ship, "crew_size", None)
    if crew_size is not None and not CREW_SIZE_RANGE[0] <= crew_size <= CREW_SIZE_RANGE[1]:
        raise InvalidInput("Incorrect Ship.crew_size")

    speed = getattr(ship, "speed", None)
    if speed is not None and not SPEED_RANGE[0] <= speed <= SPEED_RANGE[1]:
        raise InvalidInput("Incorrect Ship.speed")

    prod_date = getattr(ship, "prod_date", None)
    if prod_date is not None and not PROD_YEAR_RANGE[0] <= prod_date.year <= PROD_YEAR_RANGE[1]:
        raise InvalidInput("Incorrect Ship.prod_date")
