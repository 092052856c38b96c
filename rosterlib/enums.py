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
""" Database enums """

import collections
import enum


class EmployeeRole(enum.IntEnum):
    """The role of an |employee|.

    The integer value is what gets stored in the database, the label
    (the lower case member name) is what gets displayed and accepted
    as input.
    """

    EMPLOYEE = 1
    MANAGER = 2
    ADMIN = 3

    @property
    def label(self):
        return self.name.lower()

    @classmethod
    def get_mapping(cls):
        """Get a label -> value mapping of all roles, in value order"""
        return collections.OrderedDict(
            (role.label, role.value) for role in cls)

    @classmethod
    def from_label(cls, label):
        """Get the role for *label*

        :raises: :exc:`ValueError` if there's no role with that label
        """
        for role in cls:
            if role.label == label:
                return role
        raise ValueError("'%s' is not a valid role" % (label, ))

    @classmethod
    def coerce(cls, value):
        """Converts a role, a role value or a role label to a role

        :raises: :exc:`ValueError` if *value* does not represent a role
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_label(value)
        if isinstance(value, bool):
            raise ValueError("'%r' is not a valid role" % (value, ))
        return cls(value)
