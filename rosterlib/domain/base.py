# -*- coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

##
## Copyright (C) 2026 Async Open Source <http://www.async.com.br>
## All rights reserved
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU Lesser General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU Lesser General Public License for more details.
##
## You should have received a copy of the GNU Lesser General Public License
## along with this program; if not, write to the Free Software
## Foundation, Inc., or visit: http://www.gnu.org/.
##
## Author(s): Stoq Team <stoq-devel@async.com.br>
##
##
"""
The base :class:`Domain` class for Roster.

"""

import functools
import logging

from storm.expr import And, Lower
from storm.info import get_obj_info
from storm.properties import Property
from storm.store import PENDING_REMOVE, ResultSet, Store

from rosterlib.database.exceptions import (IntegrityError, NotOneError,
                                            OperationalError)
from rosterlib.database.orm import ORMObject
from rosterlib.database.properties import IdCol
from rosterlib.exceptions import PersistenceError, ValidationError
from rosterlib.lib.translation import roster_gettext
from rosterlib.lib.validators import is_blank, ValidationErrors

_ = roster_gettext
log = logging.getLogger(__name__)


def scope(func):
    """Turns *func* into a scope of a domain class.

    A scope is a named query, *func* receives the class and a result set
    and returns a new result set, filtered or ordered::

        @scope
        def active(cls, results):
            return results.find(cls.is_active == True)

    It can then be called on the class passing a store, or chained on a
    result set of that class::

        Store.active(store)
        Store.active(store).alphabetical()
    """
    @functools.wraps(func)
    def wrapper(cls, results, *args, **kwargs):
        if not isinstance(results, ResultSet):
            results = results.find(cls)
        return func(cls, results, *args, **kwargs)
    wrapper.is_scope = True
    return classmethod(wrapper)


class Domain(ORMObject):
    """The base domain for Roster.

    This builds on top of :class:`rosterlib.database.orm.ORMObject` and adds:

    * validation, subclasses implement :meth:`.normalize` and
      :meth:`.validate` and the object is checked every time it's saved,
      including when storm flushes it on its own before a query.
    * the validated entry points :meth:`.create`, :meth:`.save`,
      :meth:`.update` and :meth:`.delete`
    * function to check if an value of a column is unique within a domain.
    """

    # FIXME: this is only used by pylint
    __storm_table__ = 'invalid'

    #: A list of fields from this object that should de added on the
    #: representation of this object (when calling repr())
    repr_fields = []

    #: id of this domain class, the primary key. It's a uuid generated
    #: when the object is created
    id = IdCol(primary=True)

    def __repr__(self):
        parts = ['%r' % self.id]
        for field in self.repr_fields:
            parts.append('%s=%r' % (field, getattr(self, field)))

        desc = ' '.join(parts)
        return '<%s %s>' % (self.__class__.__name__, desc)

    def __storm_pre_flush__(self):
        obj_info = get_obj_info(self)
        if obj_info.get("pending") is PENDING_REMOVE:
            return

        errors = self.get_errors(obj_info.get("store"))
        if errors:
            log.info("Refusing to write invalid %r: %r" % (self, errors))
            raise ValidationError(errors)

    #
    #  Hooks
    #

    def normalize(self):
        """Clean up the values of this object before validating them

        Subclasses override this to, for instance, remove the formatting
        of phone numbers.
        """

    def validate(self, errors, store):
        """Check the values of this object

        Subclasses override this adding every broken rule to *errors*.
        Implicit flushes are blocked while this runs, so queries can
        be done safely.

        :param errors: a :class:`ValidationErrors
          <rosterlib.lib.validators.ValidationErrors>`
        :param store: the store the object is or will be saved in.
          Might be ``None`` for objects not in a store yet
        """

    #
    #  Public API
    #

    def get_errors(self, store=None):
        """Normalizes and validates this object

        :param store: the store to check the unique values against,
          defaults to the store of this object
        :returns: a :class:`ValidationErrors
          <rosterlib.lib.validators.ValidationErrors>`
        """
        if store is None:
            store = Store.of(self)

        self.normalize()
        errors = ValidationErrors()
        if store is None:
            self.validate(errors, store)
            return errors

        store.block_implicit_flushes()
        try:
            self.validate(errors, store)
        finally:
            store.unblock_implicit_flushes()
        return errors

    def is_valid(self, store=None):
        """See :meth:`.get_errors`

        :returns: ``True`` if the object has no validation errors
        """
        return self.get_errors(store).valid

    def save(self):
        """Validates this object and writes it to the database

        The changes are flushed, not committed, the owner of the store
        should commit it.

        :returns: this object
        :raises: :exc:`rosterlib.exceptions.ValidationError` if the object
          is not valid and :exc:`rosterlib.exceptions.PersistenceError` if
          the database refused the changes
        """
        store = Store.of(self)
        if store is None:
            raise TypeError("%r needs to be added to a store before "
                            "being saved" % (self, ))

        errors = self.get_errors(store)
        if errors:
            raise ValidationError(errors)

        self._flush(store)
        return self

    def update(self, **kwargs):
        """Changes the attributes in *kwargs* and saves the object

        If the new values are not valid the old ones are restored,
        so the object is left as it was.

        :returns: this object
        :raises: see :meth:`.save`
        """
        cls = type(self)
        for attr in kwargs:
            if not hasattr(cls, attr):
                raise TypeError("class %s does not have an attribute %s" % (
                    cls.__name__, attr))

        old_values = {}
        try:
            for attr, value in kwargs.items():
                old_values[attr] = getattr(self, attr)
                setattr(self, attr, value)
            errors = self.get_errors()
        except Exception:
            self._restore(old_values)
            raise

        if errors:
            self._restore(old_values)
            raise ValidationError(errors)

        return self.save()

    def delete(self):
        """Removes this object from the database"""
        store = Store.of(self)
        store.remove(self)
        self._flush(store)

    def check_unique_value_exists(self, attribute, value,
                                  case_sensitive=True, store=None):
        """Check database for attribute/value precense

        Check if we already the given attribute/value pair in the database,
        but ignoring this object's ones.

        :param attribute: the attribute that should be unique
        :param value: value that we will check if exists in the database
        :param case_sensitive: If the checking should be case sensitive or
          not.
        :param store: the store to look in, defaults to the store of
          this object
        :returns: the existing object or ``None``
        """
        return self.check_unique_tuple_exists({attribute: value},
                                              case_sensitive, store=store)

    def check_unique_tuple_exists(self, values, case_sensitive=True,
                                  store=None):
        """Check database for values presence

        Check if we already the given attributes and values in the database,
        but ignoring this object's ones.

        :param values: dictionary of attributes:values that we will check if
          exists in the database.
        :param case_sensitive: If the checking should be case sensitive or
          not.
        :param store: the store to look in, defaults to the store of
          this object
        :returns: the existing object or ``None``
        """
        if all([value in ['', None] for value in values.values()]):
            return None

        clauses = []
        for attr, value, in values.items():
            self.__class__.validate_attr(attr)

            if not isinstance(value, str) or case_sensitive:
                clauses.append(attr == value)
            else:
                clauses.append(Lower(attr) == value.lower())

        cls = type(self)
        # Remove myself from the results.
        clauses.append(cls.id != self.id)
        query = And(*clauses)

        if store is None:
            store = Store.of(self)
        try:
            return store.find(cls, query).one()
        except NotOneError:
            # Instead of breaking if more than one tuple exists, simply
            # return the first object, but log a warning about the
            # database issue.
            values_str = ["%s => %s" % (k.name, v) for k, v in values.items()]
            log.warning(
                "more than one result found when trying to "
                "check_unique_tuple_exists on table '%s' for values: %r" % (
                    self.__class__.__name__, ', '.join(sorted(values_str))))
            return store.find(cls, query).any()

    #
    #  Validation helpers
    #

    def validate_presence(self, errors, *attributes):
        """Adds a ``presence`` error for each one of *attributes* that
        is blank"""
        for attr in attributes:
            if is_blank(getattr(self, attr)):
                errors.add(attr, 'presence', _("can't be blank"))

    def validate_format(self, errors, attr, validator, message=None):
        """Adds a ``format`` error if the value of *attr* is there but
        *validator* does not accept it"""
        value = getattr(self, attr)
        if not is_blank(value) and not validator(value):
            errors.add(attr, 'format', message or _("is invalid"))

    def validate_uniqueness(self, errors, store, attr, case_sensitive=True,
                            key=None):
        """Adds an ``uniqueness`` error if another object in *store* has
        the same value for *attr*

        :param key: the attribute holding the normalized value of *attr*
          that is compared, defaults to *attr* itself
        """
        key = key or attr
        value = getattr(self, key)
        if store is None or is_blank(value):
            return

        column = getattr(type(self), key)
        if self.check_unique_value_exists(column, value,
                                          case_sensitive=case_sensitive,
                                          store=store) is not None:
            errors.add(attr, 'uniqueness', _("has already been taken"))

    #
    #  Private
    #

    def _restore(self, values):
        for attr, value in values.items():
            setattr(self, attr, value)

    def _flush(self, store):
        try:
            store.flush()
        except (IntegrityError, OperationalError) as e:
            log.warning("Could not write %r: %s" % (self, e))
            raise PersistenceError(
                _("Could not save %s") % (type(self).__name__, ), str(e))

    #
    #  Classmethods
    #

    @classmethod
    def create(cls, store, **kwargs):
        """Creates a new object and saves it in *store*

        The object is only added to the store if it's valid.

        :param store: a store
        :param kwargs: the values of the attributes of the new object
        :returns: the new object
        :raises: see :meth:`.save`
        """
        obj = cls(**kwargs)
        errors = obj.get_errors(store)
        if errors:
            # Setting a reference to an object that is in a store
            # adds the new object to that store too
            obj_store = Store.of(obj)
            if obj_store is not None:
                obj_store.remove(obj)
            raise ValidationError(errors)

        if Store.of(obj) is None:
            store.add(obj)
        return obj.save()

    @classmethod
    def find_by_id(cls, store, obj_id):
        """Get the object with the id *obj_id*

        :returns: the object or ``None`` if it doesn't exist
        """
        return store.get(cls, obj_id)

    @classmethod
    def delete_all(cls, store):
        """Removes all objects of this class from the database

        :param store: a store
        """
        store.find(cls).remove()
        # The removed objects might still be in the cache
        store.invalidate()

    @classmethod
    def validate_attr(cls, attr, expected_type=None):
        """Make sure attr belongs to cls and has the expected type

        :param attr: the attr we will check if it is on cls
        :param expected_type: the expected type for the attr to be
            an instance of. If ``None`` will default to Property
        :raises: :exc:`TypeError` if the attr is not an instance
            of expected_type
        :raises: :exc:`ValueError` if the attr does not belong to
            this class
        """
        expected_type = expected_type or Property
        if not issubclass(expected_type, Property):
            raise TypeError(
                "expected_type %s needs to be a %s subclass" % (
                    expected_type, Property))

        # We need to iterate over cls._storm_columns to find the
        # attr's property because there's no reference to that property
        # (the descriptor) on the attr
        for attr_property, column in cls._storm_columns.items():
            if column is attr:
                break
        else:
            attr_property = None  # pylint
            raise ValueError("Domain %s does not have a column %s" % (
                cls.__name__, attr.name))

        if not isinstance(attr_property, expected_type):
            raise TypeError("attr %s needs to be a %s instance" % (
                attr.name, expected_type))
