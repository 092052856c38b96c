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

"""Base class for all objects mapped to a table"""

from storm.base import Storm
from storm.store import Store


class ORMObject(Storm):
    """An object stored in a table.

    Keyword arguments are set as attributes, so a new object can be
    created and added to a store in one go, eg
    ``Employee(store=store, first_name="Ed")``

    :raises: :exc:`TypeError` if a keyword argument is not an attribute
      of the class
    """

    def __init__(self, store=None, **kwargs):
        if store:
            store.add(self)

        cls = type(self)
        for attr, value in kwargs.items():
            if not hasattr(cls, attr):
                raise TypeError("class %s does not have an attribute %s" % (
                    cls.__name__, attr))

            # storm does not set references to None correctly
            if value is not None:
                setattr(self, attr, value)

    def __eq__(self, other):
        if type(self) is not type(other):
            return False
        return self.id == other.id

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self), self.id))

    @property
    def store(self):
        """The store this object belongs to or ``None``"""
        return Store.of(self)
