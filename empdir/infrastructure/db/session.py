# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from empdir.shared.config import DatabaseConfig
from empdir.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _create_engine(config: DatabaseConfig) -> Engine:
    if config.url.startswith("sqlite"):
        engine = create_engine(
            config.url,
            echo=False,
            connect_args={
                "check_same_thread": False,
                "timeout": int(config.pool_timeout),
            },
        )
        _use_immediate_transactions(engine)
        return engine

    return create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
    )


def _use_immediate_transactions(engine: Engine) -> None:
    # pysqlite defers BEGIN until the first write, so two writers can both
    # hold SHARED locks and one fails with "database is locked" instead of
    # waiting. Take the write lock up front so the busy timeout applies.
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, _record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _on_begin(connection) -> None:
        connection.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """Process-wide engine and session factory, built once at startup."""

    def __init__(self, config: DatabaseConfig) -> None:
        self.engine: Engine = _create_engine(config)
        self.session_factory = scoped_session(
            sessionmaker(
                bind=self.engine,
                autoflush=False,
                autocommit=False,
                expire_on_commit=False,
            )
        )

    def init_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.session_factory.remove()
        self.engine.dispose()
