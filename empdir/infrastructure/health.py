# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from empdir.infrastructure.db import Database
from empdir.shared.logging import logger


def check_database(database: Database) -> bool:
    try:
        return database.ping()
    except SQLAlchemyError as exc:
        logger.warning(f"health: database probe failed: {type(exc).__name__}")
        return False


__all__ = ["check_database"]
