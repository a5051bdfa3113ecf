"""Use-case for discarding a session.

Tokens are stateless, so nothing is revoked server-side: the transport layer
clears the cookie and a copied token stays valid until it expires.
"""

from __future__ import annotations

from empdir.domain.accounts.exceptions import InvalidTokenError
from empdir.domain.accounts.repositories import SessionTokenCodec
from empdir.shared.logging import logger


class LogoutAccountUseCase:
    def __init__(self, *, tokens: SessionTokenCodec) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> int | None:
        if not token:
            logger.info("accounts.logout: no session cookie present")
            return None
        try:
            principal = self._tokens.verify(token)
        except InvalidTokenError as exc:
            logger.info(f"accounts.logout: discarding unusable token ({exc.reason})")
            return None
        logger.info(f"accounts.logout: account_id={principal.account_id} discarded session")
        return principal.account_id
