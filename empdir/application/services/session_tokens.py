# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded session tokens."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from empdir.domain.accounts.entities import Principal, SessionToken
from empdir.domain.accounts.exceptions import InvalidTokenError
from empdir.domain.accounts.repositories import SessionTokenCodec

SESSION_TTL = timedelta(days=2)
ALGORITHM = "HS256"
_REQUIRED_CLAIMS = ["sub", "username", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtSessionTokenCodec(SessionTokenCodec):
    """HS256 JWT codec.

    The signing secret is fixed at construction. ``verify`` is pure: it never
    touches storage, and every failure is reported as ``InvalidTokenError``
    whose ``reason`` (``malformed``, ``signature`` or ``expired``) is only
    meant for server-side logs.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("session token secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, account_id: int, username: str) -> SessionToken:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        claims = {
            "sub": str(account_id),
            "username": username,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(claims, self._secret, algorithm=ALGORITHM)
        return SessionToken(
            account_id=account_id,
            username=username,
            token=token,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> Principal:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("expired") from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidTokenError("signature") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("malformed") from exc

        username = claims.get("username")
        try:
            account_id = int(claims["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("malformed") from exc
        if not isinstance(username, str) or not username:
            raise InvalidTokenError("malformed")

        return Principal(account_id=account_id, username=username)


__all__ = ["ALGORITHM", "SESSION_TTL", "JwtSessionTokenCodec"]
