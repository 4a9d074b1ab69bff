"""Shared fixtures for the TapCount test suite."""

import pytest
from starlette.testclient import TestClient

from tapcount import AppConfig, Environment, JsonFileStore, create_app


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "touchcount.json"


@pytest.fixture
def config(data_path):
    config = AppConfig.for_environment(Environment.TESTING)
    config.data_path = data_path
    return config


@pytest.fixture
def store(data_path):
    return JsonFileStore(data_path)


@pytest.fixture
def app(config, store):
    return create_app(config, store)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
