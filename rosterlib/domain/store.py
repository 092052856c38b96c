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
"""Stores, the places where employees work"""

# pylint: enable=E1101

from storm.expr import Select
from storm.references import ReferenceSet
from zope.interface import implementer

from rosterlib.database.properties import BoolCol, UnicodeCol
from rosterlib.domain.assignment import Assignment
from rosterlib.domain.base import Domain, scope
from rosterlib.domain.interfaces import IActive, IDescribable
from rosterlib.lib.formatters import format_phone_number, raw_phone_number
from rosterlib.lib.translation import roster_gettext
from rosterlib.lib.validators import (validate_phone_number, validate_state,
                                      validate_zip_code, is_blank)

_ = roster_gettext


@implementer(IActive)
@implementer(IDescribable)
class Store(Domain):
    """A store of the company.

    Every store is in one of the states where the company does
    business, see :obj:`rosterlib.lib.validators.STATES`. Names are
    unique, ignoring case.

    Employees are assigned to stores through |assignments|.

    SQLite only folds the case of ASCII letters, so the name is
    compared through :attr:`.name_key`, folded in Python.
    """

    __storm_table__ = 'store'

    repr_fields = ['name']

    #: the name of the store
    name = UnicodeCol()

    #: the case folded name, what makes the name unique
    name_key = UnicodeCol()

    street = UnicodeCol()

    city = UnicodeCol()

    #: the two letter abbreviation of the state
    state = UnicodeCol()

    #: five digits, eg ``15213``
    zip_code = UnicodeCol()

    #: only the ten digits, without formatting
    phone = UnicodeCol()

    #: if the store is open
    is_active = BoolCol('active', default=True)

    #: all the |assignments| of this store, past and current
    assignments = ReferenceSet('id', 'Assignment.branch_id')

    #
    # Scopes
    #

    @scope
    def active(cls, results):
        return results.find(cls.is_active == True)

    @scope
    def inactive(cls, results):
        return results.find(cls.is_active == False)

    @scope
    def alphabetical(cls, results):
        return results.copy().order_by(cls.name)

    #
    # Properties
    #

    @property
    def employees(self):
        """All the |employees| that ever worked on this store"""
        from rosterlib.domain.person import Employee
        query = Employee.id.is_in(
            Select(Assignment.employee_id, Assignment.branch_id == self.id))
        return self.store.find(Employee, query)

    #
    # Domain
    #

    def normalize(self):
        self.phone = raw_phone_number(self.phone)
        if is_blank(self.name):
            self.name_key = None
        else:
            self.name_key = self.name.casefold()

    def validate(self, errors, store):
        self.validate_presence(errors, 'name', 'street', 'city', 'state',
                               'zip_code', 'phone')
        self.validate_uniqueness(errors, store, 'name', key='name_key')
        if not is_blank(self.state) and not validate_state(self.state):
            errors.add('state', 'inclusion', _("is not included in the list"))
        self.validate_format(errors, 'zip_code', validate_zip_code,
                             _("must be a valid five digit zip code"))
        self.validate_format(errors, 'phone', validate_phone_number,
                             _("must be a 10-digit number"))

    #
    # IActive
    #

    def make_inactive(self):
        self.is_active = False
        self.save()

    def make_active(self):
        self.is_active = True
        self.save()

    def get_status_string(self):
        if self.is_active:
            return _('Active')
        return _('Inactive')

    #
    # IDescribable
    #

    def get_description(self):
        return self.name

    #
    # Public API
    #

    def get_formatted_phone_number(self):
        """The phone number formatted as ``(412) 123-4567``"""
        return format_phone_number(self.phone)
