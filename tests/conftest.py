import pytest
from fastapi.testclient import TestClient

import config
from app import create_app
from booker_client import open_client
from booking_data import generate_booking


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run the booking scenarios against BOOKER_BASE_URL instead of the in-process fake",
    )


@pytest.fixture(scope="session")
def booking():
    # Generated once per run and shared read-only by every scenario.
    return generate_booking()


@pytest.fixture
def booker(request):
    if request.config.getoption("--live"):
        with open_client() as client:
            yield client
    else:
        with TestClient(create_app(), base_url=config.BASE_URL) as client:
            yield client
