import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from space_app.database import Base, build_engine, get_db
from space_app.main import app
from space_app.repositories.ship_repository import ShipRepository
from space_app.services.filters import to_epoch_millis
from space_app.services.ship_service import ShipService


def millis(*args):
    return to_epoch_millis(datetime(*args))


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db):
    return ShipRepository(db)


@pytest.fixture
def service(repository):
    return ShipService(repository)


@pytest.fixture
def client(engine):
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = testing_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ship_payload():
    return {
        "name": "Orion III",
        "planet": "Mars",
        "shipType": "MERCHANT",
        "prodDate": millis(2995, 6, 15, 10, 0),
        "isUsed": True,
        "speed": 0.82,
        "crewSize": 617,
    }
