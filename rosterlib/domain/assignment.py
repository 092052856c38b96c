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
"""Assignments, the periods an employee works in a store"""

# pylint: enable=E1101

from storm.references import Reference

from rosterlib.database.properties import DateCol, IdCol
from rosterlib.domain.base import Domain, scope
from rosterlib.lib.translation import roster_gettext
from rosterlib.lib.validators import validate_date_range

_ = roster_gettext


class Assignment(Domain):
    """An |employee| working in a |store| for a period of time.

    An assignment without an :attr:`.end_date` is open, the employee
    still works in that store.
    """

    __storm_table__ = 'assignment'

    repr_fields = ['start_date', 'end_date']

    branch_id = IdCol('store_id')

    #: the |store| where the employee works
    branch = Reference(branch_id, 'Store.id')

    employee_id = IdCol()

    #: the |employee| assigned to the store
    employee = Reference(employee_id, 'Employee.id')

    #: the first day of work in the store
    start_date = DateCol()

    #: the last day of work in the store, ``None`` while it's open
    end_date = DateCol(default=None)

    #
    # Scopes
    #

    @scope
    def current(cls, results):
        return results.find(cls.end_date == None)

    @scope
    def past(cls, results):
        return results.find(cls.end_date != None)

    @scope
    def chronological(cls, results):
        return results.copy().order_by(cls.start_date)

    #
    # Domain
    #

    def validate(self, errors, store):
        for attr in ['branch', 'employee']:
            if getattr(self, attr + '_id') is None:
                errors.add(attr, 'presence', _("can't be blank"))
        self.validate_presence(errors, 'start_date')
        if not validate_date_range(self.start_date, self.end_date):
            errors.add('end_date', 'range',
                       _("must be on or after the start date"))

    #
    # Public API
    #

    def is_open(self):
        return self.end_date is None

    def close(self, end_date):
        """Ends this assignment at *end_date* and saves it

        :param end_date: the last day of work in the store
        """
        self.end_date = end_date
        self.save()
