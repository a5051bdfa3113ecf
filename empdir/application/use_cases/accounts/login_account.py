# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from empdir.domain.accounts.entities import SessionToken
from empdir.domain.accounts.exceptions import InvalidCredentialsError
from empdir.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    SessionTokenCodec,
)


class LoginAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: SessionTokenCodec,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens

    @cached_property
    def _decoy_hash(self) -> str:
        return self._password_hasher.hash("decoy-password-never-matches")

    def execute(self, username: str, secret: str) -> SessionToken:
        account = self._accounts.find_by_username(username)

        if account is None:
            # Burn the same hashing cost as a real comparison.
            self._password_hasher.verify(secret, self._decoy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(secret, account.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(account.id, account.username)
