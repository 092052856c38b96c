import pytest

from rosterlib.database import admin
from rosterlib.database.admin import (create_base_schema, drop_tables,
                                      initialize_system)
from rosterlib.database.exceptions import OperationalError
from rosterlib.database.settings import DatabaseSettings
from rosterlib.domain.store import Store
from rosterlib.exceptions import ConfigError


def _table_names(store):
    result = store.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
    return [row[0] for row in result]


@pytest.fixture
def empty_store():
    store = DatabaseSettings(rdbms='sqlite').create_store()
    yield store
    if not store.obsolete:
        store.close()


def test_create_base_schema(empty_store):
    create_base_schema(empty_store, rdbms='sqlite')
    assert _table_names(empty_store) == ['assignment', 'employee', 'store']


def test_create_base_schema_twice(empty_store):
    create_base_schema(empty_store, rdbms='sqlite')
    with pytest.raises(OperationalError):
        create_base_schema(empty_store, rdbms='sqlite')


def test_drop_tables(store):
    drop_tables(store)
    assert _table_names(store) == []
    # Dropping again does nothing
    drop_tables(store)


def test_initialize_system(store, example_creator):
    example_creator.create_store()
    assert initialize_system(store, rdbms='sqlite') is store
    assert store.find(Store).is_empty()
    assert _table_names(store) == ['assignment', 'employee', 'store']


def test_unsupported_rdbms(empty_store):
    with pytest.raises(ConfigError):
        create_base_schema(empty_store, rdbms='oracle')


@pytest.mark.parametrize('rdbms', ('sqlite', 'postgres'))
def test_schemas_are_bundled(rdbms):
    statements = list(admin._split_statements(admin._get_schema(rdbms)))
    assert statements[0].startswith('CREATE TABLE store')
    assert not any(s.startswith('--') for s in statements)
    assert len([s for s in statements if s.startswith('CREATE TABLE')]) == 3
