from collections.abc import Iterator

import pytest
from sqlalchemy import Engine
from sqlalchemy.engine import Connection

from iprecord.config import Config, DatabaseConfig
from iprecord.infrastructure.persistence.database import create_db_engine, init_db


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = create_db_engine(Config(database=DatabaseConfig(url="sqlite://")))
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def connection(engine: Engine) -> Iterator[Connection]:
    with engine.connect() as connection:
        yield connection
