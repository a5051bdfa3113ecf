# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: int
    sequence_id: int
    username: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionToken:

    account_id: int
    username: str
    token: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class Principal:
    """Identity resolved from a verified session token for one request."""

    account_id: int
    username: str
