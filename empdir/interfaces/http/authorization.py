# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Session cookie transport and the gate in front of protected routes."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from flask import Response, g, request

from empdir.application.services.session_tokens import SESSION_TTL
from empdir.domain.accounts.entities import Principal
from empdir.domain.accounts.exceptions import InvalidTokenError
from empdir.domain.accounts.repositories import SessionTokenCodec
from empdir.shared.errors import UnauthorizedError
from empdir.shared.logging import logger

TOKEN_COOKIE = "token"


@dataclass(slots=True, frozen=True)
class SessionCookie:
    """Issuing and clearing must use the same name, path and attributes."""

    secure: bool = False
    name: str = TOKEN_COOKIE
    path: str = "/"
    samesite: str = "Lax"
    max_age: int = int(SESSION_TTL.total_seconds())

    def attach(self, response: Response, token: str) -> None:
        response.set_cookie(
            self.name,
            token,
            max_age=self.max_age,
            path=self.path,
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            self.name,
            path=self.path,
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )


def _fingerprint(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()[:8]


class AuthorizationGate:
    def __init__(self, tokens: SessionTokenCodec, cookie: SessionCookie) -> None:
        self._tokens = tokens
        self._cookie = cookie

    def _extract_token(self) -> str:
        token = request.cookies.get(self._cookie.name, "")
        if not token:
            auth = request.headers.get("Authorization", "")
            if auth.startswith("Bearer "):
                token = auth[7:].strip()
        return token

    def authenticate(self) -> Principal:
        token = self._extract_token()
        if not token:
            logger.warning(f"auth.gate: no token on {request.method} {request.path}")
            raise UnauthorizedError("No token, authorization denied")

        try:
            principal = self._tokens.verify(token)
        except InvalidTokenError as exc:
            logger.warning(
                f"auth.gate: rejected token <hash:{_fingerprint(token)}> "
                f"reason={exc.reason} on {request.method} {request.path}"
            )
            raise UnauthorizedError("Token is not valid") from exc

        logger.debug(f"auth.gate: ok account_id={principal.account_id} {request.method} {request.path}")
        return principal

    def verify_token(self, view: Callable[..., Any]) -> Callable[..., Any]:
        """Wrap ``view`` so it only runs for a verified caller.

        The resolved ``Principal`` is handed to the view as the ``principal``
        keyword argument and kept on ``flask.g`` for the rest of the request.
        """

        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            principal = self.authenticate()
            g.principal = principal
            g.user_id = principal.account_id
            return view(*args, principal=principal, **kwargs)

        return wrapper


__all__ = ["TOKEN_COOKIE", "AuthorizationGate", "SessionCookie"]
