import pytest
from dateutil.relativedelta import relativedelta

from rosterlib.database.admin import create_base_schema
from rosterlib.database.settings import DatabaseSettings
from rosterlib.domain.assignment import Assignment
from rosterlib.domain.exampledata import ExampleCreator
from rosterlib.domain.store import Store
from rosterlib.lib.dateutils import localtoday, years_ago


@pytest.fixture
def store():
    store = DatabaseSettings(rdbms='sqlite').create_store()
    create_base_schema(store, rdbms='sqlite')
    yield store
    if not store.obsolete:
        store.rollback(close=True)


@pytest.fixture
def example_creator(store):
    ec = ExampleCreator()
    ec.set_store(store)
    return ec


@pytest.fixture
def stores(store, example_creator):
    return dict(
        bethany=Store.create(store, name='Bethany', street='300 College St',
                             city='Bethany', state='WV', zip_code='26032',
                             phone='3041234567', is_active=True),
        cleveland=Store.create(store, name='Cleveland', street='200 Euclid Ave',
                               city='Cleveland', state='OH', zip_code='44101',
                               phone='2161234567', is_active=False),
        pittsburgh=Store.create(store, name='Pittsburgh', street='100 Forbes Ave',
                                city='Pittsburgh', state='PA', zip_code='15213',
                                phone='4121234567', is_active=True),
        cmu=example_creator.create_store(),
    )


@pytest.fixture
def employees(example_creator):
    return dict(
        ed=example_creator.create_employee(),
        cindy=example_creator.create_employee(
            first_name='Cindy', last_name='Crawford', ssn='084-35-9822',
            date_of_birth=years_ago(17)),
        chuck=example_creator.create_employee(
            first_name='Chuck', last_name='Waldo',
            date_of_birth=years_ago(26), is_active=False),
        alex=example_creator.create_employee(
            first_name='Alex', last_name='Heimann', role='admin'),
    )


@pytest.fixture
def assignments(store, stores, employees):
    today = localtoday().date()
    cmu = stores['cmu']
    return dict(
        ed=Assignment.create(store, branch=cmu, employee=employees['ed'],
                             start_date=years_ago(1)),
        cindy=Assignment.create(store, branch=cmu, employee=employees['cindy'],
                                start_date=years_ago(2),
                                end_date=today - relativedelta(months=6)),
        promote_cindy=Assignment.create(store, branch=cmu,
                                        employee=employees['cindy'],
                                        start_date=today - relativedelta(months=6)),
    )
