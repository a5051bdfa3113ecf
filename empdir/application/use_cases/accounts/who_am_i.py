# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from empdir.domain.accounts.entities import Account, Principal
from empdir.domain.accounts.exceptions import AccountNotFoundError
from empdir.domain.accounts.repositories import AccountRepository


class WhoAmIUseCase:
    def __init__(self, *, accounts: AccountRepository) -> None:
        self._accounts = accounts

    def execute(self, principal: Principal) -> Account:
        account = self._accounts.find_by_id(principal.account_id)
        if account is None:
            raise AccountNotFoundError()
        return account
