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
"""Employees and their roles"""

# pylint: enable=E1101

import logging

from storm.expr import Desc, Select
from storm.references import ReferenceSet
from zope.interface import implementer

from rosterlib.database.expr import NotIn
from rosterlib.database.properties import (BoolCol, DateCol, IntEnumCol,
                                           UnicodeCol)
from rosterlib.domain.assignment import Assignment
from rosterlib.domain.base import Domain, scope
from rosterlib.domain.interfaces import IActive, IDescribable
from rosterlib.domain.store import Store
from rosterlib.enums import EmployeeRole
from rosterlib.lib.dateutils import years_ago
from rosterlib.lib.formatters import (format_phone_number, raw_phone_number,
                                      raw_ssn)
from rosterlib.lib.translation import roster_gettext
from rosterlib.lib.validators import validate_phone_number, validate_ssn

_ = roster_gettext
log = logging.getLogger(__name__)


@implementer(IActive)
@implementer(IDescribable)
class Employee(Domain):
    """An employee of the company.

    The social security number identifies the employee, no two
    employees can have the same one. Phone numbers and social security
    numbers are stored with only their digits, the formatting characters
    are removed before validating.

    Employees work in |stores|, an |assignment| records when an
    employee started (and possibly stopped) working in a store.
    """

    __storm_table__ = 'employee'

    repr_fields = ['first_name', 'last_name']

    #: A label -> value mapping of the roles, eg ``{'employee': 1, ...}``
    roles = EmployeeRole.get_mapping()

    first_name = UnicodeCol()

    last_name = UnicodeCol()

    #: only the ten digits, without formatting
    phone = UnicodeCol()

    #: social security number, only the nine digits
    ssn = UnicodeCol()

    date_of_birth = DateCol(default=None)

    #: the :class:`role <rosterlib.enums.EmployeeRole>` of the employee.
    #: Labels (eg ``'manager'``) can also be assigned to it
    role = IntEnumCol(EmployeeRole, default=EmployeeRole.EMPLOYEE,
                      allow_none=False)

    #: if the employee still works for the company
    is_active = BoolCol('active', default=True)

    #: all the |assignments| of this employee, past and current
    assignments = ReferenceSet('id', 'Assignment.employee_id')

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
        return results.copy().order_by(cls.last_name, cls.first_name)

    @scope
    def regulars(cls, results):
        return results.find(cls.role == EmployeeRole.EMPLOYEE)

    @scope
    def managers(cls, results):
        return results.find(cls.role == EmployeeRole.MANAGER)

    @scope
    def admins(cls, results):
        return results.find(cls.role == EmployeeRole.ADMIN)

    @scope
    def unassigned(cls, results):
        """Employees without an open |assignment|"""
        open_assignments = Select(Assignment.employee_id,
                                  Assignment.end_date == None)
        return results.find(NotIn(cls.id, open_assignments))

    #
    # Properties
    #

    @property
    def name(self):
        """The name as it's sorted, eg ``Gruberman, Ed``"""
        return '%s, %s' % (self.last_name, self.first_name)

    @property
    def proper_name(self):
        """The name as it's spoken, eg ``Ed Gruberman``"""
        return '%s %s' % (self.first_name, self.last_name)

    @property
    def stores(self):
        """All the |stores| this employee ever worked on"""
        query = Store.id.is_in(
            Select(Assignment.branch_id, Assignment.employee_id == self.id))
        return self.store.find(Store, query)

    #
    # Domain
    #

    def normalize(self):
        self.phone = raw_phone_number(self.phone)
        self.ssn = raw_ssn(self.ssn)

    def validate(self, errors, store):
        self.validate_presence(errors, 'first_name', 'last_name', 'phone',
                               'ssn')
        self.validate_format(errors, 'phone', validate_phone_number,
                             _("must be a 10-digit number"))
        self.validate_format(errors, 'ssn', validate_ssn,
                             _("must be a 9-digit number"))
        self.validate_uniqueness(errors, store, 'ssn')

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

    def is_employee_role(self):
        return self.role == EmployeeRole.EMPLOYEE

    def is_manager_role(self):
        return self.role == EmployeeRole.MANAGER

    def is_admin_role(self):
        return self.role == EmployeeRole.ADMIN

    def is_over_18(self, today=None):
        """If the employee was at least 18 years old at *today*

        :param today: defaults to the current date
        """
        if self.date_of_birth is None:
            return False
        return self.date_of_birth <= years_ago(18, today)

    def get_current_assignment(self):
        """Get the open |assignment| of this employee

        An employee is not supposed to have more than one open
        assignment. If that happens the most recent one is returned.

        :returns: the assignment or ``None``
        """
        results = self.store.find(
            Assignment, employee_id=self.id,
            end_date=None).order_by(Desc(Assignment.start_date))
        if results.count() > 1:
            log.warning("Employee %r has %d open assignments" % (
                self, results.count()))
        return results.first()

    def get_formatted_phone_number(self):
        """The phone number formatted as ``(412) 123-4567``"""
        return format_phone_number(self.phone)
