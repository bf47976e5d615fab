"""
Shared fixtures: an in-memory SQLite database per test and a TestClient
whose requests run against it.
"""

import os
import sys
from datetime import date, timedelta

# Must be set before travel_booking is imported: settings are read once
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("LOG_JSON", "false")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from travel_booking.database import create_tables, enable_sqlite_foreign_keys, get_db
from travel_booking.main import app
from travel_booking.models import Customer, Flight, Booking, TravelAgentBooking
from travel_booking.services import (
    build_customer_service,
    build_flight_service,
    build_booking_service,
    build_travel_agent_booking_service,
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db):
    """TestClient sharing the test session, lifespan not started."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def customer_service(db):
    return build_customer_service(db)


@pytest.fixture
def flight_service(db):
    return build_flight_service(db)


@pytest.fixture
def booking_service(db):
    return build_booking_service(db)


@pytest.fixture
def travel_agent_booking_service(db):
    return build_travel_agent_booking_service(db)


@pytest.fixture
def make_customer():
    def _make(**overrides) -> Customer:
        data = {
            "first_name": "Jane",
            "last_name": "Doe",
            "email": "jane.doe@mail.com",
            "phone_number": "07123456789",
        }
        data.update(overrides)
        return Customer(**data)
    return _make


@pytest.fixture
def make_flight():
    def _make(**overrides) -> Flight:
        data = {"flight_number": "BA123", "departure": "LHR", "destination": "JFK"}
        data.update(overrides)
        return Flight(**data)
    return _make


@pytest.fixture
def make_booking():
    def _make(**overrides) -> Booking:
        data = {"flight_id": 1, "customer_id": 1, "order_date": date.today() + timedelta(days=30)}
        data.update(overrides)
        return Booking(**data)
    return _make


@pytest.fixture
def make_travel_agent_booking():
    def _make(**overrides) -> TravelAgentBooking:
        data = {
            "flight_id": 1,
            "taxi_id": 7,
            "hotel_id": 9,
            "customer_id": 1,
            "order_date": date.today() + timedelta(days=30),
        }
        data.update(overrides)
        return TravelAgentBooking(**data)
    return _make
