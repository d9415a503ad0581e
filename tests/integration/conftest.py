import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from typetrainer.config.settings import Settings
from typetrainer.database.connection import apply_schema, close_pool, get_connection, init_pool

TEST_USER_ID = 900_001


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "typetrainer_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        apply_schema()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a scratch database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def test_user_id(db_conn: psycopg.Connection[Any]) -> Generator[int, None, None]:
    """A user ID whose texts are wiped before and after the test."""

    def wipe() -> None:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM texts WHERE user_id = %s", (TEST_USER_ID,))
        db_conn.commit()

    wipe()
    try:
        yield TEST_USER_ID
    finally:
        wipe()
