# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from empdir.domain.accounts.entities import Account as DomainAccount
from empdir.domain.accounts.exceptions import AccountAlreadyExistsError
from empdir.domain.accounts.repositories import AccountRepository
from empdir.infrastructure.db.models import Account
from empdir.infrastructure.unit_of_work import unit_of_work_scope
from empdir.shared.logging import logger


def _to_domain(row: Account) -> DomainAccount:
    return DomainAccount(
        id=row.id,
        sequence_id=row.sequence_id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainAccount | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Account).filter(Account.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, account_id: int) -> DomainAccount | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Account, account_id)
            return _to_domain(row) if row else None

    def create(self, sequence_id: int, username: str, password_hash: str) -> DomainAccount:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = Account(
                    sequence_id=sequence_id,
                    username=username,
                    password_hash=password_hash,
                )
                session.add(row)
                session.flush()
                account = _to_domain(row)
        except IntegrityError as exc:
            logger.info("accounts.repo: unique constraint rejected registration")
            raise AccountAlreadyExistsError() from exc
        return account
