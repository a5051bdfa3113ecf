from __future__ import annotations

from pathlib import Path

from flask.testing import FlaskClient

from empdir.shared.config import AppConfig, DatabaseConfig, SecurityConfig, StorageConfig

TEST_SECRET = "test-signing-secret-0123456789-abcdefgh"
FAST_HASH = "pbkdf2:sha256:1000"


def make_config(tmp_path: Path, **overrides: object) -> AppConfig:
    values: dict[str, object] = {
        "APP_ENV": "testing",
        "JWT_SECRET": TEST_SECRET,
        "PASSWORD_HASH_METHOD": FAST_HASH,
        "database": DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'empdir.db'}"),
        "security": SecurityConfig(ENABLE_RATE_LIMIT=False),
        "storage": StorageConfig(UPLOAD_DIR=tmp_path / "uploads"),
    }
    values.update(overrides)
    return AppConfig(**values)  # type: ignore[arg-type]


def register(
    client: FlaskClient,
    sequence_id: int = 1,
    username: str = "alice",
    secret: str = "p@ss1234",
):
    return client.post(
        "/api/auth/register",
        json={"sequenceId": sequence_id, "username": username, "secret": secret},
    )


def login(client: FlaskClient, username: str = "alice", secret: str = "p@ss1234"):
    return client.post("/api/auth/login", json={"username": username, "secret": secret})
