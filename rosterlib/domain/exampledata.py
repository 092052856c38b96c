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
"""Creators of valid domain objects, for tests and examples"""

# pylint: enable=E1101

import itertools

from rosterlib.lib.dateutils import years_ago


def create_store(store):
    return ExampleCreator.create(store, 'Store')


def create_employee(store):
    return ExampleCreator.create(store, 'Employee')


class ExampleCreator(object):
    """Creates domain objects with sensible default values

    The objects are created with :meth:`Domain.create
    <rosterlib.domain.base.Domain.create>`, so they are validated and
    flushed. Any attribute can be overridden by passing it as a
    keyword argument::

        >>> ec = ExampleCreator()  # doctest: +SKIP
        >>> ec.set_store(store)  # doctest: +SKIP
        >>> ec.create_employee(first_name='Cindy')  # doctest: +SKIP
    """

    def __init__(self):
        self.store = None
        self.clear()

    # Public API

    @classmethod
    def create(cls, store, name):
        ec = cls()
        ec.set_store(store)
        return ec.create_by_type(name)

    def clear(self):
        self._store_names = itertools.count(1)
        self._ssns = itertools.count(1)

    def set_store(self, store):
        self.store = store

    def create_by_type(self, model_type):
        known_types = {
            'Assignment': self.create_assignment,
            'Employee': self.create_employee,
            'Store': self.create_store,
        }
        if isinstance(model_type, str):
            model_name = model_type
        else:
            model_name = model_type.__name__
        if model_name in known_types:
            return known_types[model_name]()
        raise ValueError(model_name)

    def create_store(self, **kwargs):
        from rosterlib.domain.store import Store
        count = next(self._store_names)
        values = dict(name='CMU' if count == 1 else 'CMU %d' % (count, ),
                      street='5000 Forbes Ave',
                      city='Pittsburgh',
                      state='PA',
                      zip_code='15213',
                      phone='412-268-2000')
        values.update(kwargs)
        return Store.create(self.store, **values)

    def create_employee(self, **kwargs):
        from rosterlib.domain.person import Employee
        values = dict(first_name='Ed',
                      last_name='Gruberman',
                      phone='412-268-3259',
                      ssn='%09d' % (123456780 + next(self._ssns), ),
                      date_of_birth=years_ago(19))
        values.update(kwargs)
        return Employee.create(self.store, **values)

    def create_assignment(self, **kwargs):
        from rosterlib.domain.assignment import Assignment
        if 'branch' not in kwargs:
            kwargs['branch'] = self.create_store()
        if 'employee' not in kwargs:
            kwargs['employee'] = self.create_employee()
        kwargs.setdefault('start_date', years_ago(1))
        return Assignment.create(self.store, **kwargs)
