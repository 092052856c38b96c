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

"""Settings required to access the database, hostname, username etc
"""
import logging
import os
import urllib.parse

from storm.database import create_database
from storm.uri import URI

from rosterlib.database.exceptions import OperationalError
from rosterlib.exceptions import ConfigError, DatabaseError
from rosterlib.lib.osutils import get_username
from rosterlib.lib.translation import roster_gettext

_ = roster_gettext
log = logging.getLogger(__name__)

DEFAULT_RDBMS = 'sqlite'
SUPPORTED_RDBMS = ('sqlite', 'postgres')

#: The sqlite database name that keeps everything in memory
MEMORY_DBNAME = ':memory:'


class DatabaseSettings(object):
    """DatabaseSettings contains all the information required to connect to
    a database, such as hostname, username and password.

    For ``sqlite`` *dbname* is the path of the database file, or
    ``:memory:`` for a database that lives as long as its connection.
    For ``postgres`` the usual libpq environment variables (``PGHOST``,
    ``PGPORT``, ``PGDATABASE`` and ``PGUSER``) are used for the settings
    that are not given.
    """

    def __init__(self, rdbms=None, address=None, port=None,
                 dbname=None, username=None, password=''):
        if not rdbms:
            rdbms = DEFAULT_RDBMS
        if rdbms == 'postgres':
            if not address:
                address = os.environ.get('PGHOST', 'localhost')
            if not dbname:
                dbname = os.environ.get('PGDATABASE', 'roster')
            if not username:
                username = os.environ.get('PGUSER', get_username())
            if not port:
                port = int(os.environ.get('PGPORT', 5432))
        elif rdbms == 'sqlite':
            if not dbname:
                dbname = MEMORY_DBNAME
        self.rdbms = rdbms
        self.address = address
        self.port = port
        self.dbname = dbname
        self.username = username
        self.password = password

    def __repr__(self):
        return '<DatabaseSettings rdbms=%s address=%s port=%s dbname=%s username=%s>' % (
            self.rdbms, self.address, self.port, self.dbname, self.username)

    def _build_dsn(self, dbname, filter_password=False):
        # Here we construct a uri for database access like:
        # 'postgres://username@localhost:5432/dbname' or
        # 'sqlite:/path/to/dbname'
        if self.rdbms not in SUPPORTED_RDBMS:
            raise ConfigError("Unsupported database type: %s" % self.rdbms)

        if self.rdbms == 'sqlite':
            if dbname == MEMORY_DBNAME:
                return 'sqlite:'
            return 'sqlite:%s' % (dbname, )

        if self.password:
            password = ":"
            if filter_password:
                password += '*****'
            else:
                password += urllib.parse.quote_plus(self.password)
        else:
            password = ""
        authority = '%s%s@%s:%s' % (
            self.username, password, self.address, self.port)

        return '%s://%s/%s' % (self.rdbms, authority, dbname)

    def _get_store_internal(self, dbname):
        from rosterlib.database.runtime import RosterStore
        uri = URI(self._build_dsn(dbname))
        log.info("Connecting to %s" % (
            self._build_dsn(dbname, filter_password=True), ))
        try:
            store = RosterStore(create_database(uri))
        except OperationalError as e:
            log.info('OperationalError: %s' % e)
            raise DatabaseError(e.args[0])
        except ImportError as e:
            raise DatabaseError(
                _("Could not connect to %s database. The error message is "
                  "'%s'. Please fix the connection settings you have set "
                  "and try again.") % (self.rdbms, e))
        return store

    #
    # Public API
    #

    def get_store_uri(self, filter_password=False):
        """Returns a uri representing the current database settings.
        It's used by the orm to connect to a database.
        :param filter_password: if the password should be filtered out
        :returns: a string like postgres://username@localhost/dbname
        """
        return self._build_dsn(self.dbname, filter_password=filter_password)

    def create_store(self):
        """Creates a store using the provided default settings.
        store.close() needs to be called when usage of this store is
        completed.

        :returns: the new store
        """
        return self._get_store_internal(self.dbname)

    def copy(self):
        return DatabaseSettings(address=self.address,
                                dbname=self.dbname,
                                rdbms=self.rdbms,
                                port=self.port,
                                username=self.username,
                                password=self.password)


db_settings = DatabaseSettings()
