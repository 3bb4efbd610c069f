from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from space_app.models.ship import ShipType
from space_app.services.filters import from_epoch_millis, to_epoch_millis


class ShipInSchema(BaseModel):
    """Create/edit body. Every field is optional here; the service decides
    which ones are required. ``id`` and ``rating`` are not accepted."""
    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = Field(None, alias="shipType")
    prod_date: Optional[datetime] = Field(None, alias="prodDate")
    is_used: Optional[bool] = Field(None, alias="isUsed")
    speed: Optional[float] = None
    crew_size: Optional[int] = Field(None, alias="crewSize")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("prod_date", mode="before")
    @classmethod
    def millis_to_datetime(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                millis = int(value)
            except (OverflowError, ValueError) as exc:
                raise ValueError("prodDate is not a timestamp") from exc
            return from_epoch_millis(millis)
        return value


class ShipBaseSchema(BaseModel):
    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(serialization_alias="shipType")
    prod_date: datetime = Field(serialization_alias="prodDate")
    is_used: bool = Field(serialization_alias="isUsed")
    speed: float
    crew_size: int = Field(serialization_alias="crewSize")
    rating: float

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("prod_date")
    def datetime_to_millis(self, value: datetime) -> int:
        return to_epoch_millis(value)


class ShipResponse(BaseModel):
    status: str
    message: str
    ship: ShipBaseSchema


class ListShipResponse(BaseModel):
    status: str
    message: str
    ships: List[ShipBaseSchema]


class CountShipResponse(BaseModel):
    status: str
    message: str
    count: int
