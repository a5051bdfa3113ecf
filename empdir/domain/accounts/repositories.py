# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Account, Principal, SessionToken


class AccountRepository(Protocol):
    def find_by_username(self, username: str) -> Account | None: ...
    def find_by_id(self, account_id: int) -> Account | None: ...
    def create(self, sequence_id: int, username: str, password_hash: str) -> Account: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenCodec(Protocol):
    def issue(self, account_id: int, username: str) -> SessionToken: ...
    def verify(self, token: str) -> Principal: ...
