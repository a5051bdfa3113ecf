from __future__ import annotations

from pathlib import Path

import pytest

from empdir.infrastructure.container import Container
from empdir.shared.config import AppConfig, SecurityConfig
from empdir.tests.helpers import TEST_SECRET, make_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "JWT_SECRET", "ALLOWED_ORIGINS", "ENABLE_RATE_LIMIT", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)


def test_missing_signing_secret_refuses_to_start() -> None:
    with pytest.raises(SystemExit) as info:
        AppConfig(_env_file=None)

    assert info.value.code == 1


def test_insecure_secret_is_rejected_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "changeme")

    with pytest.raises(SystemExit):
        AppConfig(_env_file=None)


def test_insecure_secret_is_tolerated_outside_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "dev")

    config = AppConfig(_env_file=None)

    assert not config.is_production()
    assert config.cookie_secure is False


def test_values_are_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("ENABLE_RATE_LIMIT", "false")

    config = AppConfig(_env_file=None)

    assert config.jwt_secret == TEST_SECRET
    assert config.cookie_secure is True
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.security.enable_rate_limit is False


def test_defaults() -> None:
    security = SecurityConfig(_env_file=None)
    config = AppConfig(_env_file=None, JWT_SECRET=TEST_SECRET)

    assert security.allowed_origins == ["http://localhost:3000"]
    assert security.rate_limit_requests == 100
    assert security.rate_limit_window == 900
    assert config.database.url == "sqlite:///empdir.db"
    assert config.storage.max_upload_bytes == 5 * 1024 * 1024


def test_container_refuses_to_build_codec_without_secret(tmp_path: Path) -> None:
    config = make_config(tmp_path)
    config.jwt_secret = None

    with pytest.raises(RuntimeError):
        Container(config).session_token_codec
