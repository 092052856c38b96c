import logging

import pytest
from rosterlib.database.properties import UnicodeCol
from rosterlib.database.runtime import RosterResultSet
from rosterlib.domain.assignment import Assignment
from rosterlib.domain.person import Employee
from rosterlib.domain.store import Store


def test_scopes_are_marked():
    assert Store.active.is_scope
    assert Employee.unassigned.is_scope
    assert not hasattr(Employee.make_active, 'is_scope')


def test_scope_accepts_store_or_result_set(store, stores):
    results = Store.active(store)
    assert isinstance(results, RosterResultSet)
    assert Store.inactive(store.find(Store)).count() == 1


def test_get_errors_without_store():
    # Unique values can't be checked without a store
    errors = Employee(first_name='Ed', last_name='Gruberman',
                      phone='4125550000', ssn='123456789').get_errors()
    assert errors.valid


def test_check_unique_value_exists(store, stores):
    shop = Store(name='Other')
    assert shop.check_unique_value_exists(
        Store.name, 'Bethany', store=store) == stores['bethany']
    assert shop.check_unique_value_exists(
        Store.name, 'bethany', store=store) is None
    assert shop.check_unique_value_exists(
        Store.name, 'bethany', case_sensitive=False,
        store=store) == stores['bethany']
    assert shop.check_unique_value_exists(Store.name, '', store=store) is None


def test_check_unique_value_ignores_itself(stores):
    bethany = stores['bethany']
    assert bethany.check_unique_value_exists(Store.name, 'Bethany') is None


def test_check_unique_tuple_exists(store, stores):
    shop = Store(name='Other')
    values = {Store.state: 'PA', Store.city: 'Pittsburgh'}
    assert shop.check_unique_tuple_exists(values, store=store) is not None
    values = {Store.state: 'OH', Store.city: 'Pittsburgh'}
    assert shop.check_unique_tuple_exists(values, store=store) is None


def test_check_unique_tuple_exists_with_many_results(store, stores, caplog):
    shop = Store(name='Other')
    with caplog.at_level(logging.WARNING, logger='rosterlib.domain.base'):
        found = shop.check_unique_value_exists(Store.state, 'PA', store=store)
    assert found in (stores['pittsburgh'], stores['cmu'])
    assert 'more than one result found' in caplog.text


def test_validate_attr():
    Store.validate_attr(Store.name)
    Store.validate_attr(Store.name, UnicodeCol)
    with pytest.raises(ValueError):
        Store.validate_attr(Employee.first_name)
    with pytest.raises(TypeError):
        Store.validate_attr(Store.name, object)


def test_delete_all_leaves_other_tables(store, stores, employees, assignments):
    Assignment.delete_all(store)
    assert store.find(Store).count() == 4
    assert store.find(Employee).count() == 4
