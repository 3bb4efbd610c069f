import enum
from dataclasses import dataclass

from space_app.config import settings


class ShipOrder(str, enum.Enum):
    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def field(self) -> str:
        return {
            ShipOrder.ID: "id",
            ShipOrder.SPEED: "speed",
            ShipOrder.DATE: "prod_date",
            ShipOrder.RATING: "rating",
        }[self]


@dataclass
class Pagination:
    page_number: int = settings.DEFAULT_PAGE_NUMBER
    page_size: int = settings.DEFAULT_PAGE_SIZE
    order: ShipOrder = ShipOrder.ID

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size
