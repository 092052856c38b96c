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

"""Runtime routines for applications"""

import functools
import logging
import sys

from storm.expr import Undef
from storm.store import ResultSet, Store

from rosterlib.database.exceptions import InterfaceError
from rosterlib.database.settings import db_settings

log = logging.getLogger(__name__)

_default_store = None


class RosterResultSet(ResultSet):
    """A result set that knows the scopes of the class it returns

    Scopes (see :func:`rosterlib.domain.base.scope`) of the queried class
    can be called on it, so they can be chained::

        Employee.active(store).managers().alphabetical()
    """

    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)

        cls_info = self._find_spec.default_cls_info
        method = None
        if cls_info is not None:
            method = getattr(cls_info.cls, attr, None)
        if not getattr(method, 'is_scope', False):
            raise AttributeError("%r object has no attribute %r" % (
                type(self).__name__, attr))
        return functools.partial(method, self)

    def find(self, *args, **kwargs):
        # Filtering an ordered result set should not lose the ordering,
        # so Employee.alphabetical(store).active() is the same as
        # Employee.active(store).alphabetical()
        resultset = super(RosterResultSet, self).find(*args, **kwargs)
        if resultset._order_by is Undef and self._order_by is not Undef:
            resultset._order_by = self._order_by
        return resultset


class RosterStore(Store):
    """The Roster Store.

    This is the API to access a database.
    It represents more or less a database transaction, after modifying
    an object you need to either :meth:`.commit` or :meth:`.rollback`
    the store.

    The primary way of querying object from a store is via the :meth:`.find`
    method, but you can also use :meth:`.Store.get` if you know the id
    of the object. find returns a :class:`RosterResultSet`.

    Objects needs to be added to a store. This can either be done via
    :meth:`RosterStore.add`, passing in the store parameter to a
    Domain object or using :meth:`Domain.create
    <rosterlib.domain.base.Domain.create>`.

    You normally create a store using :func:`.new_store`, it needs to be
    :meth:`closed <close>` when you're done or a database connection will
    be leaked. Using it as a context manager commits it when the block
    finishes without errors and closes it in any case.

    :attribute retval: ``True`` by default, set it to ``False`` to
      rollback instead of committing at the end of a ``with`` block
    """

    _result_set_factory = RosterResultSet

    def __init__(self, database=None, cache=None):
        """
        Creates a new store

        :param database: the database to connect to or ``None``
        :param cache: storm cache to use or ``None``
        """
        self.retval = True
        self.obsolete = False
        self.committed = False

        if database is None:
            database = get_default_store().get_database()
        Store.__init__(self, database=database, cache=cache)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.committed = self.confirm(commit=self.retval)
        else:
            self.rollback(close=False)
        self.close()

    #
    #  Public API
    #

    def commit(self, close=False):
        """Commits a database.
        This needs to be done to submit the actually inserts to the database.

        :param close: If ``True``, the store will also be closed after committed.
        """
        self._check_obsolete()
        super(RosterStore, self).commit()
        if close:
            self.close()

    def rollback(self, close=True):
        """Rollback the transaction

        :param close: If ``True``, the connection will also be closed and will not
          be available for use anymore. If False, only a rollback is done and
          it will still be possible to use it for other queries.
        """
        self._check_obsolete()
        super(RosterStore, self).rollback()
        if close:
            self.close()

    def close(self):
        """Close the store.

        Closes the socket that represents that database connection, this needs to
        be called when you finished using the store.
        """
        self._check_obsolete()
        super(RosterStore, self).close()
        self.obsolete = True

    def fetch(self, obj):
        """Fetches an existing object in the context of this store.

        This is useful to 'move' an object from one store to another.

        :param obj: object to fetch
        :returns: the object in the context of this store
        """
        self._check_obsolete()
        return self.get(type(obj), obj.id)

    def confirm(self, commit):
        """Encapsulated method for committing/aborting changes in models.

        :param commit: True for commit, False for rollback
        :returns: True if it was committed, False otherwise
        """
        # Allow False/None
        if commit:
            self.commit()
        else:
            self.rollback(close=False)

        return bool(commit)

    #
    #  Private
    #

    def _check_obsolete(self):
        if self.obsolete:
            raise InterfaceError("This transaction has already been closed")


def get_default_store():
    """This function returns the default/primary store.

    It's created from :obj:`rosterlib.database.settings.db_settings` the
    first time it's needed and only closed by calling
    ``set_default_store(None)``.

    :returns: default store
    """
    if _default_store is None:
        set_default_store(db_settings.create_store())
    return _default_store


def set_default_store(store):
    """This sets a new default store and closes the
    existing one if any.

    This is only called during startup and should not be used elsewhere
    :param store: the new store to set
    """
    global _default_store
    if (store is None and _default_store is not None and
            not _default_store.obsolete):
        _default_store.close()
    _default_store = store


def new_store():
    """
    Create a new transaction.

    Note that for ``sqlite`` in memory databases every connection has a
    database of its own, so a new store will not see the tables and data
    of the default one.

    :returns: a transaction
    """
    log.debug('Creating a new transaction in %s()'
              % sys._getframe(1).f_code.co_name)

    return RosterStore()
