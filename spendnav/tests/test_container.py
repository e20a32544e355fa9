from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from spendnav.app import create_app
from spendnav.infrastructure.container import Container
from spendnav.infrastructure.db import ENGINE, SessionLocal, build_engine
from spendnav.infrastructure.db.models import User
from spendnav.shared.config import DatabaseConfig

pytestmark = pytest.mark.usefixtures("reset_database")


@pytest.fixture()
def private_engine() -> Iterator[Engine]:
    engine = build_engine(DatabaseConfig())
    yield engine
    engine.dispose()


def test_default_container_uses_shared_session_factory() -> None:
    container = Container()

    assert container.engine is ENGINE
    assert container.session_factory is SessionLocal


def test_create_app_prepares_the_container_engine(private_engine: Engine) -> None:
    container = Container(engine=private_engine)
    app = create_app(container)
    client = app.test_client()

    assert {"users", "expenses"} <= set(inspect(private_engine).get_table_names())
    assert client.get("/api/health").get_json() == {"ok": True, "database": "ok"}

    response = client.post(
        "/api/auth/register",
        json={"firstName": "Ann", "lastName": "Lee", "email": "ann@example.com", "password": "pw"},
    )

    assert response.status_code == 200
    assert container.user_repository.find_by_email("ann@example.com") is not None
    session = SessionLocal()
    try:
        assert session.query(User).count() == 0
    finally:
        session.close()
