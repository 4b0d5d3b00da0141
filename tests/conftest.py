"""Pytest configuration and fixtures for booking platform tests."""
import pytest
from datetime import date
from fastapi.testclient import TestClient

from apps.api.deps import get_store
from apps.api.main import app
from db.session import create_engine, create_session_factory, drop_db, init_db
from db.store import DocumentStore
from domain.enums import BusinessType
from domain.models import HotelCreate, RestaurantCreate, SalonCreate
from services.availability import AvailabilityService
from services.business_service import BusinessService
from services.invoice_service import InvoiceService
from services.privatisation_service import PrivatisationService
from services.reservation_service import ReservationService


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine("sqlite://", echo=False)
    init_db(bind=engine)
    yield engine
    drop_db(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def store(db_engine):
    """Document store bound to the test engine."""
    return DocumentStore(create_session_factory(db_engine))


@pytest.fixture(scope="function")
def business_service(store):
    return BusinessService(store)


@pytest.fixture(scope="function")
def reservation_service(store):
    """Reservation service with the standard 75 / 100 price constants."""
    return ReservationService(store, default_price_per_guest=75.0, privatisation_price_per_guest=100.0)


@pytest.fixture(scope="function")
def invoice_service(store):
    return InvoiceService(store)


@pytest.fixture(scope="function")
def privatisation_service(store):
    return PrivatisationService(store)


@pytest.fixture(scope="function")
def availability_service(store):
    return AvailabilityService(store)


@pytest.fixture(scope="function")
def restaurant_settings():
    """Restaurant settings with two priced lunch/afternoon windows."""
    return {
        "horaires": [
            {"ouverture": "09:00", "fermeture": "12:00", "prix": 50},
            {"ouverture": "12:00", "fermeture": "18:00", "prix": 70},
        ],
        "capaciteTotale": 40,
        "tables": {"size2": 2, "size4": 1, "size6": 0, "size8": 0},
        "frequenceCreneauxMinutes": 30,
        "maxReservationsParCreneau": 3,
        "maxPartySize": 8,
    }


@pytest.fixture(scope="function")
def restaurant(business_service, restaurant_settings):
    """A persisted restaurant."""
    return business_service.create(
        BusinessType.RESTAURANT,
        RestaurantCreate.model_validate({"name": "Chez Paul", "settings": restaurant_settings}),
    )


@pytest.fixture(scope="function")
def hotel(business_service):
    """A persisted hotel open from May to June 2024."""
    return business_service.create(
        BusinessType.HOTEL,
        HotelCreate.model_validate({
            "name": "Hotel du Lac",
            "openingPeriods": [{"startDate": "2024-05-01", "endDate": "2024-06-30"}],
        }),
    )


@pytest.fixture(scope="function")
def salon(business_service):
    """A persisted salon."""
    return business_service.create(BusinessType.SALON, SalonCreate(name="Salon Belle"))


@pytest.fixture(scope="function")
def booking_date():
    """A Saturday, for consistent testing."""
    return date(2024, 6, 15)


@pytest.fixture(scope="function")
def client(store):
    """API test client wired to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
