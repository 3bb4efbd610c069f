from datetime import datetime

import pytest

from space_app.exceptions import InvalidInput, NotFound
from space_app.schemas.ship import ShipInSchema
from space_app.services import filters
from space_app.services.paging import Pagination, ShipOrder
from space_app.services.ship_service import parse_id


def new_ship(**overrides):
    fields = dict(name="Nostromo", planet="LV-426", ship_type="TRANSPORT",
                  prod_date=datetime(2800, 7, 1, 12, 0), speed=0.5, crew_size=7)
    fields.update(overrides)
    return ShipInSchema(**fields)


def test_create_defaults_used_and_computes_rating(service):
    ship = service.create(new_ship(is_used=None))
    assert ship.id is not None
    assert ship.is_used is False
    assert ship.rating == 0.18


def test_create_used_ship(service):
    ship = service.create(new_ship(is_used=True))
    assert ship.rating == 0.09


@pytest.mark.parametrize("field", ["name", "planet", "ship_type", "prod_date", "speed", "crew_size"])
def test_create_missing_field_persists_nothing(service, repository, field):
    with pytest.raises(InvalidInput):
        service.create(new_ship(**{field: None}))
    assert repository.count([filters.MATCH_ALL]) == 0


def test_get_missing(service):
    with pytest.raises(NotFound):
        service.get(404)


def test_edit_changes_only_supplied_fields(service):
    created = service.create(new_ship())
    edited = service.edit(created.id, ShipInSchema(name="Sulaco", prod_date=datetime(3019, 1, 1, 12, 0)))
    assert edited.name == "Sulaco"
    assert edited.planet == "LV-426"
    assert edited.crew_size == 7
    assert edited.speed == 0.5
    assert edited.rating == 40.0


def test_edit_recomputes_rating_even_without_rating_fields(service, db):
    created = service.create(new_ship())
    created.rating = 99.0
    db.commit()
    edited = service.edit(created.id, ShipInSchema(planet="Acheron"))
    assert edited.rating == 0.18


def test_edit_invalid_value_keeps_record(service):
    created = service.create(new_ship())
    with pytest.raises(InvalidInput):
        service.edit(created.id, ShipInSchema(crew_size=0))
    assert service.get(created.id).crew_size == 7


def test_edit_missing(service):
    with pytest.raises(NotFound):
        service.edit(12, ShipInSchema(name="Ghost"))


def test_edit_validates_before_lookup(service):
    with pytest.raises(InvalidInput):
        service.edit(12, ShipInSchema(speed=2.0))


def test_delete(service):
    created = service.create(new_ship())
    service.delete(created.id)
    with pytest.raises(NotFound):
        service.get(created.id)
    with pytest.raises(NotFound):
        service.delete(created.id)


@pytest.mark.parametrize("raw", [None, "", "0", "abc", "1.5", "4_2", " 42", "42\n", "0x2a",
                                 "9223372036854775808", "99999999999999999999"])
def test_parse_id_rejects(raw):
    with pytest.raises(InvalidInput):
        parse_id(raw)


def test_parse_id():
    assert parse_id("42") == 42
    assert parse_id("+7") == 7
    assert parse_id("9223372036854775807") == 2 ** 63 - 1


def test_list_with_predicates_and_pages(service):
    for name, speed in [("Alpha", 0.3), ("Beta", 0.1), ("Gamma", 0.2), ("alphabet", 0.4)]:
        service.create(new_ship(name=name, speed=speed))

    matched = service.list([filters.filter_by_name("lph")])
    assert [s.name for s in matched] == ["Alpha", "alphabet"]

    by_speed = service.list([filters.MATCH_ALL], Pagination(page_number=0, page_size=2, order=ShipOrder.SPEED))
    assert [s.name for s in by_speed] == ["Beta", "Gamma"]
    second = service.list([filters.MATCH_ALL], Pagination(page_number=1, page_size=2, order=ShipOrder.SPEED))
    assert [s.name for s in second] == ["Alpha", "alphabet"]

    assert service.count([filters.filter_by_speed(0.2, None), filters.filter_by_name("a")]) == 3
