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
""" Exception and warning definitions """


class ConfigError(Exception):
    """Error for config files which don't have a certain section"""


class NoConfigurationError(Exception):
    """Raise this error when we don't have a config option properly set."""


class DatabaseError(Exception):
    """General database errors

    There are two ways of raising this exception:

    raise DatabaseError(msg)
    raise DatabaseError(short, msg)
    """
    def __init__(self, msg, long=None):
        if not long:
            short = 'Database Error'
        else:
            short = msg
            msg = long
        super(DatabaseError, self).__init__(msg)
        self.msg = msg
        self.short = short

    def __str__(self):
        return self.msg


class PersistenceError(DatabaseError):
    """A change could not be written to the database

    This is raised when the database refuses a change the validation
    layer accepted, for instance when a unique constraint is broken by
    a concurrent writer, or when the database is not available.
    """


class ValidationError(Exception):
    """A domain object failed its validation rules

    :attribute errors: the :class:`ValidationErrors
      <rosterlib.lib.validators.ValidationErrors>` describing every
      violated rule
    """
    def __init__(self, errors):
        self.errors = errors
        super(ValidationError, self).__init__(
            '; '.join(errors.full_messages()))
