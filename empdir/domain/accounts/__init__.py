# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Account, Principal, SessionToken
from .exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from .repositories import AccountRepository, PasswordHasher, SessionTokenCodec

__all__ = [
    "Account",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "AccountRepository",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "Principal",
    "SessionToken",
    "SessionTokenCodec",
]
