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

import uuid

from storm.properties import Bool, Date, SimpleProperty, Unicode
from storm.variables import Variable

from rosterlib.enums import EmployeeRole


def _new_id():
    return str(uuid.uuid4())


class UUIDVariable(Variable):
    __slots__ = ()

    def parse_set(self, value, from_db):
        return str(value)


class UUIDCol(SimpleProperty):
    """A textual UUID.

    When used as a primary key the value is generated on the client,
    so objects have an id as soon as they are created, before they
    reach the database.
    """
    variable_class = UUIDVariable

    def __init__(self, name=None, primary=False, **kwargs):
        if primary and 'default' not in kwargs:
            kwargs.setdefault('default_factory', _new_id)
        super(UUIDCol, self).__init__(name, primary, **kwargs)


class IntEnumVariable(Variable):
    __slots__ = ('_enum', )

    def __init__(self, enum, *args, **kwargs):
        self._enum = enum
        Variable.__init__(self, *args, **kwargs)

    def parse_set(self, value, from_db):
        if from_db:
            return self._enum(value)
        return self._enum.coerce(value)

    def parse_get(self, value, to_db):
        if to_db:
            return int(value)
        return value


class IntEnumCol(SimpleProperty):
    """An :class:`enum.IntEnum` stored as an integer.

    Besides the enum members, the integer values and the labels of the
    members can be assigned to it::

        >>> employee.role = 'admin'
        >>> employee.role
        <EmployeeRole.ADMIN: 3>

    Anything else raises :exc:`ValueError`. The value read is always
    the member, its label is the form to display::

        >>> employee.role.label
        'admin'
    """
    variable_class = IntEnumVariable

    def __init__(self, enum=EmployeeRole, name=None, primary=False, **kwargs):
        kwargs['enum'] = enum
        super(IntEnumCol, self).__init__(name, primary, **kwargs)


# Columns, we're keeping the Col suffix to avoid clashes between
# datetime.date and storm.properties.Date
BoolCol = Bool
DateCol = Date
IdCol = UUIDCol
UnicodeCol = Unicode
