# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from empdir.domain.accounts.entities import Account
from empdir.domain.accounts.exceptions import AccountAlreadyExistsError
from empdir.domain.accounts.repositories import AccountRepository, PasswordHasher
from empdir.shared.logging import logger


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher

    def execute(self, sequence_id: int, username: str, secret: str) -> Account:
        if self._accounts.find_by_username(username):
            raise AccountAlreadyExistsError()

        hashed = self._password_hasher.hash(secret)
        # The unique constraints settle concurrent registrations; the lookup
        # above only spares the hashing cost in the common case.
        account = self._accounts.create(sequence_id, username, hashed)
        logger.info(f"accounts.register: created account_id={account.id}")
        return account
