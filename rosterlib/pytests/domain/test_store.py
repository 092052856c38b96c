import pytest
from storm.expr import Undef
from unittest import mock
from zope.interface.verify import verifyObject

from rosterlib.domain.interfaces import IActive, IDescribable
from rosterlib.domain.store import Store
from rosterlib.exceptions import PersistenceError, ValidationError


def _store_values(**kwargs):
    values = dict(name='Shadyside', street='5500 Walnut St',
                  city='Pittsburgh', state='PA', zip_code='15232',
                  phone='4125551234')
    values.update(kwargs)
    return values


def test_interfaces(stores):
    assert verifyObject(IActive, stores['bethany'])
    assert verifyObject(IDescribable, stores['bethany'])
    assert stores['bethany'].get_description() == 'Bethany'


def test_valid_store(store):
    assert Store(**_store_values()).is_valid(store)


@pytest.mark.parametrize('field', ('name', 'street', 'city', 'state',
                                   'zip_code', 'phone'))
@pytest.mark.parametrize('value', (None, '', '   '))
def test_required_fields(store, field, value):
    errors = Store(**_store_values(**{field: value})).get_errors(store)
    assert not errors.valid
    assert errors.get_rules(field) == ['presence']
    assert errors[field] == ["can't be blank"]


def test_state_inclusion(store):
    errors = Store(**_store_values(state='NY')).get_errors(store)
    assert errors.get_rules('state') == ['inclusion']
    for state in ['PA', 'OH', 'WV']:
        assert Store(**_store_values(state=state)).is_valid(store)


@pytest.mark.parametrize('zip_code', ('1234', '123456', '1234a'))
def test_invalid_zip_code(store, zip_code):
    errors = Store(**_store_values(zip_code=zip_code)).get_errors(store)
    assert errors['zip_code'] == ['must be a valid five digit zip code']


def test_valid_zip_code(store):
    assert Store(**_store_values(zip_code='15217')).is_valid(store)


@pytest.mark.parametrize('phone', ('(304) 123-4567', '304-123-4567',
                                   '304.123.4567', '3041234567'))
def test_phone_is_normalized(store, phone):
    shop = Store.create(store, **_store_values(phone=phone))
    assert shop.phone == '3041234567'
    assert shop.get_formatted_phone_number() == '(304) 123-4567'


@pytest.mark.parametrize('phone', ('304-123-456', '1-304-123-4567',
                                   'phone'))
def test_invalid_phone(store, phone):
    errors = Store(**_store_values(phone=phone)).get_errors(store)
    assert errors.get_rules('phone') in (['format'], ['presence'])
    assert not errors.valid


def test_name_is_unique_ignoring_case(store, stores):
    for name in ['Bethany', 'bethany', 'BETHANY']:
        with pytest.raises(ValidationError) as exc_info:
            Store.create(store, **_store_values(name=name))
        errors = exc_info.value.errors
        assert errors.get_rules('name') == ['uniqueness']
        assert errors['name'] == ['has already been taken']
    assert store.find(Store).count() == 4


def test_uniqueness_ignores_itself(store, stores):
    bethany = stores['bethany']
    bethany.name = 'BETHANY'
    assert bethany.is_valid()
    bethany.save()
    assert Store.find_by_id(store, bethany.id).name == 'BETHANY'


def test_name_is_unique_in_the_database(store, stores):
    # Two writers can pass the validation at the same time, the
    # database still refuses the duplicated name
    with mock.patch.object(Store, 'validate_uniqueness'):
        with pytest.raises(PersistenceError):
            Store.create(store, **_store_values(name='cleveland'))


def test_create_invalid_does_not_add(store):
    with pytest.raises(ValidationError) as exc_info:
        Store.create(store, **_store_values(zip_code='abc'))
    assert str(exc_info.value) == 'Zip code must be a valid five digit zip code'
    assert store.find(Store).is_empty()


def test_update(store, stores):
    bethany = stores['bethany']
    bethany.update(city='Wheeling', phone='(304) 555-1234')

    store.invalidate()
    bethany = Store.find_by_id(store, bethany.id)
    assert bethany.city == 'Wheeling'
    assert bethany.phone == '3045551234'


def test_update_invalid_keeps_old_values(store, stores):
    bethany = stores['bethany']
    with pytest.raises(ValidationError):
        bethany.update(city='Wheeling', zip_code='123')
    assert bethany.city == 'Bethany'
    assert bethany.zip_code == '26032'
    # Nothing invalid is pending
    assert store.find(Store, zip_code='123').is_empty()


def test_update_unknown_attribute(stores):
    with pytest.raises(TypeError):
        stores['bethany'].update(manager='Ed')


def test_invalid_changes_are_not_flushed(store, stores):
    stores['bethany'].zip_code = 'abc'
    with pytest.raises(ValidationError):
        store.flush()
    with pytest.raises(ValidationError):
        stores['bethany'].save()
    # Restore it, so the store can be used again
    stores['bethany'].zip_code = '26032'
    store.flush()


def test_save_requires_a_store():
    with pytest.raises(TypeError):
        Store(**_store_values()).save()


def test_delete(store, stores):
    bethany = stores['bethany']
    bethany.delete()
    assert Store.find_by_id(store, bethany.id) is None
    assert store.find(Store).count() == 3


def test_delete_all(store, stores):
    Store.delete_all(store)
    assert store.find(Store).is_empty()
    assert Store.find_by_id(store, stores['cmu'].id) is None


def test_find_by_id(store, stores):
    assert Store.find_by_id(store, stores['cmu'].id) is stores['cmu']
    assert Store.find_by_id(store, 'missing') is None


def test_active(store, stores):
    assert set(Store.active(store)) == {
        stores['bethany'], stores['pittsburgh'], stores['cmu']}


def test_inactive(store, stores):
    assert list(Store.inactive(store)) == [stores['cleveland']]


def test_alphabetical(store, stores):
    assert [s.name for s in Store.alphabetical(store)] == [
        'Bethany', 'CMU', 'Cleveland', 'Pittsburgh']


def test_chained_scopes(store, stores):
    expected = ['Bethany', 'CMU', 'Pittsburgh']
    assert [s.name for s in Store.active(store).alphabetical()] == expected
    assert [s.name for s in Store.alphabetical(store).active()] == expected
    assert Store.inactive(store).active().is_empty()


def test_scope_on_result_set(store, stores):
    results = store.find(Store, state='PA')
    assert [s.name for s in Store.alphabetical(results)] == ['CMU', 'Pittsburgh']


def test_ordering_scope_does_not_change_its_argument(store, stores):
    active = Store.active(store)
    active.alphabetical()
    assert active._order_by is Undef
    assert [s.name for s in active.alphabetical()] == [
        'Bethany', 'CMU', 'Pittsburgh']


def test_make_active(store, stores):
    cleveland = stores['cleveland']
    cleveland.make_active()

    store.invalidate()
    cleveland = Store.find_by_id(store, cleveland.id)
    assert cleveland.is_active
    assert cleveland.get_status_string() == 'Active'


def test_make_inactive(store, stores):
    bethany = stores['bethany']
    bethany.make_inactive()

    store.invalidate()
    bethany = Store.find_by_id(store, bethany.id)
    assert not bethany.is_active
    assert bethany.get_status_string() == 'Inactive'


def test_make_inactive_invalid_store(store, stores):
    bethany = stores['bethany']
    bethany.state = 'NY'
    with pytest.raises(ValidationError):
        bethany.make_inactive()
    bethany.state = 'WV'


def test_employees(store, stores, employees, assignments):
    cmu = stores['cmu']
    assert set(cmu.employees) == {employees['ed'], employees['cindy']}
    assert cmu.employees.count() == 2
    assert stores['bethany'].employees.is_empty()


def test_assignments(stores, assignments):
    assert set(stores['cmu'].assignments) == set(assignments.values())
    assert stores['bethany'].assignments.count() == 0


def test_repr(stores):
    assert repr(stores['cmu']) == "<Store %r name='CMU'>" % (stores['cmu'].id, )


def test_name_is_unique_ignoring_case_of_non_ascii_letters(store):
    Store.create(store, **_store_values(name='Ärzte'))
    with pytest.raises(ValidationError) as exc_info:
        Store.create(store, **_store_values(name='ärzte'))
    assert exc_info.value.errors.get_rules('name') == ['uniqueness']
    assert [s.name for s in store.find(Store)] == ['Ärzte']


def test_non_ascii_name_is_unique_in_the_database(store):
    Store.create(store, **_store_values(name='Straße'))
    with mock.patch.object(Store, 'validate_uniqueness'):
        with pytest.raises(PersistenceError):
            Store.create(store, **_store_values(name='STRASSE'))


def test_name_key(store):
    shop = Store.create(store, **_store_values(name='Ärzte Shop'))
    assert shop.name == 'Ärzte Shop'
    assert shop.name_key == 'ärzte shop'


def test_update_with_unknown_attribute_changes_nothing(store, stores):
    bethany = stores['bethany']
    with pytest.raises(TypeError):
        bethany.update(city='Wheeling', manager='Ed')
    assert bethany.city == 'Bethany'
