import pytest
from fastapi.testclient import TestClient

from p2p_backend.config import Settings
from p2p_backend.main import create_app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "database.sqlite"


@pytest.fixture
def client(db_path):
    settings = Settings(DATABASE_URL=f"sqlite+aiosqlite:///{db_path}")
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def broken_client(tmp_path):
    # parent directory does not exist, so SQLite cannot open the file
    settings = Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path}/missing/database.sqlite")
    with TestClient(create_app(settings)) as test_client:
        yield test_client
