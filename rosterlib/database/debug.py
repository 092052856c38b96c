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

"""Logging of the SQL statements sent to the database"""

import datetime
import logging

from storm.tracer import BaseStatementTracer, install_tracer, remove_tracer_type

log = logging.getLogger(__name__)


class RosterDebugTracer(BaseStatementTracer):
    """A storm tracer that logs every statement at ``DEBUG`` level,
    followed by how long it took and how many rows it touched.

    Statements are logged with their parameters already in place, and
    numbered per connection so the ones from different stores can be
    told apart.
    """

    def __init__(self, logger=None):
        self._log = logger or log
        # Mapping id(connection) > statement count
        self._statements_count = {}
        self._start_time = None

    def _expanded_raw_execute(self, connection, raw_cursor, statement):
        key = id(connection)
        self._statements_count.setdefault(key, 0)
        self._statements_count[key] += 1

        self._start_time = datetime.datetime.now()
        self._log.debug('[%x %5d] %s', key, self._statements_count[key],
                        statement)

    def connection_raw_execute_success(self, connection, raw_cursor,
                                       statement, params):
        duration = datetime.datetime.now() - self._start_time
        seconds = duration.seconds + float(duration.microseconds) / 10 ** 6
        self._log.debug('[%x %5s] %s seconds | %s rows', id(connection), '',
                        seconds, raw_cursor.rowcount)

    def connection_raw_execute_error(self, connection, raw_cursor,
                                     statement, params, error):
        self._log.debug('[%x %5s] failed: %s', id(connection), '', error)


def enable_debugging(logger=None):
    """Start logging the SQL statements

    :param logger: the logger to use, ``rosterlib.database.debug``
      if not given
    :returns: the installed tracer
    """
    remove_tracer_type(RosterDebugTracer)
    tracer = RosterDebugTracer(logger)
    install_tracer(tracer)
    return tracer


def disable_debugging():
    """Stop logging the SQL statements"""
    remove_tracer_type(RosterDebugTracer)
