import os
import tempfile

# Keep import-time directories out of the package tree.
_SCRATCH_DIR = tempfile.mkdtemp(prefix="dubai-horizon-tests-")
os.environ.setdefault("DATA_DIR", os.path.join(_SCRATCH_DIR, "data"))
os.environ.setdefault("UPLOAD_DIR", os.path.join(_SCRATCH_DIR, "uploads"))

import pytest
import uuid
import datetime
from unittest.mock import Mock
from fastapi.testclient import TestClient

from dubai_horizon.main import app
from dubai_horizon.data_managers import (
    BookingDataManager,
    ClientStateStore,
    DestinationDataManager,
    ReviewDataManager,
    UserDataManager,
    get_booking_data_manager,
    get_client_state_store,
    get_destination_data_manager,
    get_review_data_manager,
    get_user_data_manager,
)
from dubai_horizon.services.auth import SessionStore, get_session_store
from dubai_horizon.services.itinerary_generator import ItineraryGenerator, get_itinerary_generator

ADMIN_EMAIL = "admin@example.com"
CLIENT_ID = "browser-123"

# ────────────────────────────────────────────────
# Data managers and test client
# ────────────────────────────────────────────────

@pytest.fixture
def data_dir(tmp_path):
    """Create a temporary data directory per test."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def managers(data_dir):
    """Fresh JSON-backed managers living in the temporary data directory."""
    return {
        "destinations": DestinationDataManager(str(data_dir / "featured_destinations.json")),
        "reviews": ReviewDataManager(str(data_dir / "reviews.json")),
        "bookings": BookingDataManager(str(data_dir / "bookings.json")),
        "users": UserDataManager(str(data_dir / "users.json")),
        "client_state": ClientStateStore(str(data_dir / "client_state.json")),
    }


@pytest.fixture
def mock_generator():
    """Itinerary generator that never reaches OpenAI."""
    return Mock(spec=ItineraryGenerator)


@pytest.fixture
def sessions():
    return SessionStore(session_duration=60 * 60)


@pytest.fixture
def test_client(managers, sessions, mock_generator, monkeypatch, tmp_path):
    """Return a TestClient wired to the temporary managers."""
    monkeypatch.setenv("ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("BOOKING_WEBHOOK_URL", "")

    app.dependency_overrides[get_destination_data_manager] = lambda: managers["destinations"]
    app.dependency_overrides[get_review_data_manager] = lambda: managers["reviews"]
    app.dependency_overrides[get_booking_data_manager] = lambda: managers["bookings"]
    app.dependency_overrides[get_user_data_manager] = lambda: managers["users"]
    app.dependency_overrides[get_client_state_store] = lambda: managers["client_state"]
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_itinerary_generator] = lambda: mock_generator

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

# ────────────────────────────────────────────────
# Auth helpers
# ────────────────────────────────────────────────

def sign_up_and_sign_in(client, email, password="secret123", first_name="Test", last_name="User"):
    """Register a user and return Authorization headers for them."""
    response = client.post("/api/v1/auth/sign-up", json={
        "email": email,
        "password": password,
        "first_name": first_name,
        "last_name": last_name,
    })
    assert response.status_code == 201, response.text
    response = client.post("/api/v1/auth/sign-in", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def user_headers(test_client):
    return sign_up_and_sign_in(test_client, "jane.smith@example.com", first_name="Jane", last_name="Smith")


@pytest.fixture
def admin_headers(test_client):
    return sign_up_and_sign_in(test_client, ADMIN_EMAIL, first_name="Site", last_name="Admin")


@pytest.fixture
def client_headers():
    return {"X-Client-Id": CLIENT_ID}

# ────────────────────────────────────────────────
# Destination fixtures
# ────────────────────────────────────────────────

@pytest.fixture
def sample_destination_data():
    """Return sample destination data, oldest first."""
    return [
        {
            "id": str(uuid.uuid4()),
            "name": "Burj Khalifa At the Top",
            "short_description": "Views from the world's tallest building.",
            "description": "Ride the high-speed elevators to the observation decks on levels 124 and 125.",
            "main_image_url": "https://cdn.example.com/burj.jpg",
            "types": ["luxury", "family"],
            "price": 169.0,
            "currency": "AED",
            "location_address": "1 Sheikh Mohammed bin Rashid Blvd, Downtown Dubai",
            "availability": "Daily 8:30am-11pm",
            "tags": ["skyline", "landmark"],
            "created_at": str(datetime.datetime(2024, 1, 1)),
        },
        {
            "id": str(uuid.uuid4()),
            "name": "Desert Safari",
            "short_description": "Dune bashing and a Bedouin camp dinner.",
            "description": "An evening in the Lahbab desert with dune bashing, camel rides and a barbecue dinner.",
            "types": ["adventure", "desert"],
            "price": 250.0,
            "currency": "AED",
            "location_address": "Lahbab Desert, Dubai",
            "availability": "Daily, pickup at 3pm",
            "features": ["Hotel pickup", "BBQ dinner"],
            "created_at": str(datetime.datetime(2024, 2, 1)),
        },
        {
            "id": str(uuid.uuid4()),
            "name": "Al Fahidi Heritage Walk",
            "short_description": "Wind towers and museums of old Dubai.",
            "description": "A guided walk through the historic Al Bastakiya quarter with a visit to the Dubai Museum.",
            "types": ["cultural"],
            "price": 80.0,
            "currency": "AED",
            "location_address": "Al Fahidi Historical Neighbourhood, Bur Dubai",
            "availability": "Weekends 9am",
            "tags": ["history", "walking"],
            "created_at": str(datetime.datetime(2024, 3, 1)),
        },
    ]


@pytest.fixture
def seeded_destinations(managers, sample_destination_data):
    for destination in sample_destination_data:
        managers["destinations"].add(destination)
    return sample_destination_data
