from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from empdir.app import CONTAINER_KEY, create_app
from empdir.infrastructure.container import Container
from empdir.shared.config import AppConfig
from empdir.tests.helpers import login, make_config, register


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path)


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.extensions[CONTAINER_KEY].database.dispose()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions[CONTAINER_KEY]


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def logged_in_client(client: FlaskClient) -> FlaskClient:
    assert register(client).status_code == 201
    assert login(client).status_code == 200
    return client
