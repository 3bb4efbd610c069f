from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from space_app.config import settings
from space_app.database import get_db
from space_app.exceptions import InvalidInput
from space_app.models.ship import ShipType
from space_app.repositories.ship_repository import ShipRepository
from space_app.schemas.ship import (CountShipResponse, ListShipResponse, ShipBaseSchema, ShipInSchema,
                                    ShipResponse)
from space_app.services import filters
from space_app.services.filters import Predicate
from space_app.services.paging import Pagination, ShipOrder
from space_app.services.ship_service import ShipService, parse_id

ship_router = APIRouter()


def get_ship_service(db: Session = Depends(get_db)) -> ShipService:
    return ShipService(ShipRepository(db))


def ship_filters(
        name: Optional[str] = None,
        planet: Optional[str] = None,
        ship_type: Optional[ShipType] = Query(None, alias="shipType"),
        after: Optional[int] = None,
        before: Optional[int] = None,
        is_used: Optional[bool] = Query(None, alias="isUsed"),
        min_speed: Optional[float] = Query(None, alias="minSpeed"),
        max_speed: Optional[float] = Query(None, alias="maxSpeed"),
        min_crew_size: Optional[int] = Query(None, alias="minCrewSize"),
        max_crew_size: Optional[int] = Query(None, alias="maxCrewSize"),
        min_rating: Optional[float] = Query(None, alias="minRating"),
        max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> List[Predicate]:
    try:
        by_date = filters.filter_by_date(after, before)
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc
    return [
        filters.filter_by_name(name),
        filters.filter_by_planet(planet),
        filters.filter_by_ship_type(ship_type),
        by_date,
        filters.filter_by_usage(is_used),
        filters.filter_by_speed(min_speed, max_speed),
        filters.filter_by_crew_size(min_crew_size, max_crew_size),
        filters.filter_by_rating(min_rating, max_rating),
    ]


def pagination(
        order: ShipOrder = ShipOrder.ID,
        page_number: int = Query(settings.DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=0),
        page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1),
) -> Pagination:
    return Pagination(page_number=page_number, page_size=page_size, order=order)


# [...] get one page of ship records
@ship_router.get("", response_model=ListShipResponse, include_in_schema=False)
@ship_router.get("/", response_model=ListShipResponse)
def get_ships(predicates: List[Predicate] = Depends(ship_filters), page: Pagination = Depends(pagination),
              service: ShipService = Depends(get_ship_service)):
    ships = service.list(predicates, page)
    return {"status": "ok", "message": "List of ships",
            "ships": [ShipBaseSchema.model_validate(ship) for ship in ships]}


# [...] count ship records matching the filters
@ship_router.get("/count", response_model=CountShipResponse)
def get_ships_count(predicates: List[Predicate] = Depends(ship_filters),
                    service: ShipService = Depends(get_ship_service)):
    return {"status": "ok", "message": "Number of ships", "count": service.count(predicates)}


# [...] add a new ship record
@ship_router.post("", status_code=status.HTTP_201_CREATED, response_model=ShipResponse, include_in_schema=False)
@ship_router.post("/", status_code=status.HTTP_201_CREATED, response_model=ShipResponse)
def add_ship(ship: ShipInSchema, service: ShipService = Depends(get_ship_service)):
    new_ship = service.create(ship)
    return {"status": "ok", "message": "Ship added", "ship": ShipBaseSchema.model_validate(new_ship)}


# [...] get a ship record
@ship_router.get("/{ship_id}", response_model=ShipResponse)
def get_ship(ship_id: str, service: ShipService = Depends(get_ship_service)):
    ship_record = service.get(parse_id(ship_id))
    return {"status": "ok", "message": "Ship found", "ship": ShipBaseSchema.model_validate(ship_record)}


# [...] edit a ship record, only supplied fields change
@ship_router.post("/{ship_id}", response_model=ShipResponse)
@ship_router.put("/{ship_id}", response_model=ShipResponse)
def update_ship(ship_id: str, ship: ShipInSchema, service: ShipService = Depends(get_ship_service)):
    ship_record = service.edit(parse_id(ship_id), ship)
    return {"status": "ok", "message": "Ship updated", "ship": ShipBaseSchema.model_validate(ship_record)}


# [...] delete a ship record
@ship_router.delete("/{ship_id}")
def delete_ship(ship_id: str, service: ShipService = Depends(get_ship_service)):
    service.delete(parse_id(ship_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
