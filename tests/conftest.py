"""
Shared pytest fixtures for the orders generator tests
"""
import random
import signal

import pytest
from sqlalchemy import create_engine, inspect

from orders_generator.app.generator import OrderGenerator
from orders_generator.app.settings import GeneratorSettings


@pytest.fixture
def database_url(tmp_path):
    """A fresh SQLite database file per test"""
    return f"sqlite:///{tmp_path / 'orders.db'}"


@pytest.fixture
def settings(database_url):
    """Settings pointing at the test database, with no waiting"""
    return GeneratorSettings(
        database_url=database_url,
        schema_name=None,
        startup_delay=0,
        insert_interval=0,
    )


@pytest.fixture
def generator(settings):
    """A generator with a seeded random source; closed after the test if still open"""
    gen = OrderGenerator(settings, rng=random.Random(1234))
    yield gen
    if gen.connection is not None and not gen.connection.closed:
        gen.connection.close()
    if gen.engine is not None:
        gen.engine.dispose()


@pytest.fixture
def table_names(database_url):
    """Returns the tables currently in the test database, read on a separate connection"""
    def _table_names():
        engine = create_engine(database_url)
        try:
            return inspect(engine).get_table_names()
        finally:
            engine.dispose()
    return _table_names


@pytest.fixture
def restore_signals():
    """Puts back the SIGINT/SIGTERM handlers a test replaced"""
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)
