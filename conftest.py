import os

import httpx
import pytest

from app import create_app
from config import Settings, reset_settings
from http_executor import HttpExecutor

STUB_BASE_URL = "http://petstore.local/v2"


def pytest_collection_modifyitems(config, items):
    if os.getenv("PETSTORE_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="set PETSTORE_LIVE=1 to run against the public petstore")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(autouse=True)
def isolated_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def stub_settings():
    return Settings(base_url=STUB_BASE_URL, timeout=5.0)


@pytest.fixture
def pet_store():
    return {}


@pytest.fixture
def stub_executor(stub_settings, pet_store):
    transport = httpx.WSGITransport(app=create_app(pet_store))
    with HttpExecutor(stub_settings, transport=transport) as executor:
        yield executor


@pytest.fixture(params=["stub", pytest.param("live", marks=pytest.mark.live)])
def petstore_target(request):
    return request.param


@pytest.fixture
def petstore(petstore_target, stub_settings, pet_store):
    """(settings, executor) for the in-process stub or, when enabled, the public service."""
    if petstore_target == "stub":
        settings = stub_settings
        executor = HttpExecutor(settings, transport=httpx.WSGITransport(app=create_app(pet_store)))
    else:
        settings = Settings.from_env()
        executor = HttpExecutor(settings)
    yield settings, executor
    executor.close()
