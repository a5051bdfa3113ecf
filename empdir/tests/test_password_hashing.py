from __future__ import annotations

from empdir.application.services.password_hashing import WerkzeugPasswordHasher
from empdir.tests.helpers import FAST_HASH


def test_hash_is_salted_and_verifies() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_HASH)

    first = hasher.hash("p@ss1234")
    second = hasher.hash("p@ss1234")

    assert first != "p@ss1234"
    assert first != second
    assert hasher.verify("p@ss1234", first)
    assert hasher.verify("p@ss1234", second)


def test_wrong_secret_is_rejected() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_HASH)
    hashed = hasher.hash("p@ss1234")

    assert hasher.verify("wrong", hashed) is False


def test_malformed_hash_fails_closed() -> None:
    hasher = WerkzeugPasswordHasher(method=FAST_HASH)

    assert hasher.verify("p@ss1234", "not-a-hash") is False
    assert hasher.verify("p@ss1234", "bogus$salt$deadbeef") is False
    assert hasher.verify("p@ss1234", "") is False
    assert hasher.verify("p@ss1234", "pbkdf2:sha256:99999999999999999999999$salt$abc") is False


def test_default_method_is_used_when_unset() -> None:
    hasher = WerkzeugPasswordHasher()
    hashed = hasher.hash("p@ss1234")

    assert hasher.verify("p@ss1234", hashed)
