import pytest
from fastapi.testclient import TestClient

from places_api.db import get_db
from places_api.main import app
from places_api.services.geocoding import get_geocoder
from places_api.services.image_storage import ImageStorage, get_image_storage
from tests.mock_mongo import MockDatabase
from tests.utils import StubGeocoder


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def database():
    return MockDatabase()


@pytest.fixture
def geocoder():
    return StubGeocoder()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "images"


@pytest.fixture
def client(database, geocoder, upload_dir):
    storage = ImageStorage(upload_dir=str(upload_dir))
    app.dependency_overrides[get_db] = lambda: database
    app.dependency_overrides[get_geocoder] = lambda: geocoder
    app.dependency_overrides[get_image_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()
