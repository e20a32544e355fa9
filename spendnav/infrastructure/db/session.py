# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from spendnav.shared.config import DatabaseConfig, load_config
from spendnav.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def build_engine(database: DatabaseConfig) -> Engine:
    engine_kwargs: dict[str, Any] = {"echo": False, "future": True, "pool_pre_ping": True}
    if database.is_memory():
        # One shared connection, otherwise each checkout sees an empty database.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        engine_kwargs["poolclass"] = StaticPool
    elif database.is_sqlite():
        engine_kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(database.pool_timeout),
        }
    else:
        engine_kwargs.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_timeout=database.pool_timeout,
        )

    engine = create_engine(database.url, **engine_kwargs)

    if database.is_sqlite():
        event.listen(engine, "connect", _set_sqlite_pragmas)

    return engine


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
    finally:
        cur.close()


ENGINE: Engine = build_engine(_config.database)


def build_session_factory(engine: Engine) -> scoped_session[Session]:
    return scoped_session(
        sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    )


SessionLocal = build_session_factory(ENGINE)


def init_db(engine: Engine | None = None) -> None:
    from spendnav.infrastructure.db import models  # noqa: F401 (register tables)

    Base.metadata.create_all(bind=engine or ENGINE)
    logger.info("Database schema ensured")
