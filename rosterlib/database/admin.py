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

"""Administration routines: creating the tables roster needs"""

import logging
import pkgutil

from rosterlib.database.runtime import get_default_store
from rosterlib.database.settings import db_settings, SUPPORTED_RDBMS
from rosterlib.exceptions import ConfigError

log = logging.getLogger(__name__)

#: Tables in creation order, referenced tables first
TABLES = ['store', 'employee', 'assignment']


def _get_schema(rdbms):
    if rdbms not in SUPPORTED_RDBMS:
        raise ConfigError("Unsupported database type: %s" % rdbms)
    data = pkgutil.get_data('rosterlib.database',
                            'sql/schema-%s.sql' % (rdbms, ))
    return data.decode('utf-8')


def _split_statements(sql):
    for statement in sql.split(';'):
        # Remove comment lines, so a statement can be preceded by them
        lines = [l for l in statement.splitlines()
                 if not l.strip().startswith('--')]
        statement = '\n'.join(lines).strip()
        if statement:
            yield statement


def drop_tables(store):
    """Drops all the roster tables that exist in the database of *store*

    :param store: a store
    """
    log.info('Dropping tables')
    for table in reversed(TABLES):
        store.execute('DROP TABLE IF EXISTS %s' % (table, ), noresult=True)


def create_base_schema(store, rdbms=None):
    """Creates the tables and indexes roster needs

    The tables are created inside the current transaction of *store*,
    it's up to the caller to commit it.

    :param store: a store
    :param rdbms: the kind of database *store* is connected to,
      defaults to the one in :obj:`db_settings
      <rosterlib.database.settings.db_settings>`
    """
    log.info('Creating base schema')
    schema = _get_schema(rdbms or db_settings.rdbms)
    for statement in _split_statements(schema):
        store.execute(statement, noresult=True)


def initialize_system(store=None, rdbms=None):
    """Creates a fresh database, removing all the existing data

    :param store: the store to use, the default store if ``None``
    :param rdbms: see :func:`create_base_schema`
    :returns: the store
    """
    log.info("Initialize_system")
    if store is None:
        store = get_default_store()
    drop_tables(store)
    create_base_schema(store, rdbms=rdbms)
    store.commit()
    return store
