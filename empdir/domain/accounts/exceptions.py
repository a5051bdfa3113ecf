# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from empdir.shared.errors.base import DomainError


class AccountAlreadyExistsError(DomainError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    message = "Invalid credentials"


class AccountNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Token is not valid"

    def __init__(self, reason: str = "malformed") -> None:
        super().__init__()
        self.reason = reason
