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

"""Routines for setting up roster before using the database"""

import logging
import sys

from rosterlib.database.debug import enable_debugging
from rosterlib.database.runtime import set_default_store
from rosterlib.lib.configparser import RosterConfig, register_config

log = logging.getLogger(__name__)

_handlers = []


def setup_logging(config):
    """Sends the log records to stderr and, when the config has
    a ``logfile``, to that file too

    Calling it again replaces the handlers installed by a previous call.

    :param config: a :class:`RosterConfig
      <rosterlib.lib.configparser.RosterConfig>`
    """
    root = logging.getLogger()
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    del _handlers[:]

    level = logging.getLevelName(config.get_log_level())
    if not isinstance(level, int):
        log.warning("Invalid log level %r, using WARNING" % (
            config.get_log_level(), ))
        level = logging.WARNING

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    _handlers.append(ch)

    filename = config.get_log_filename()
    if filename:
        fh = logging.FileHandler(filename)
        fh.setLevel(level)
        fh.setFormatter(formatter)
        _handlers.append(fh)

    root.setLevel(level)
    for handler in _handlers:
        root.addHandler(handler)


def setup(config=None, filename=None, initialize=False):
    """
    Loads the configuration and connects to the database.

    :param config: a RosterConfig instance, when ``None`` one is
      created from *filename* or from the default configuration file
    :param filename: the configuration file to load
    :param initialize: if the tables should be (re)created, see
      :func:`rosterlib.database.admin.initialize_system`
    :returns: the config
    """
    if config is None:
        config = RosterConfig()
        if filename:
            config.load(filename)
        else:
            config.load_default()

    register_config(config)
    setup_logging(config)

    if config.get_sqldebug():
        enable_debugging()

    settings = config.get_settings()
    log.info('Using database %r' % (settings, ))
    store = settings.create_store()
    set_default_store(store)

    if initialize:
        from rosterlib.database.admin import initialize_system
        initialize_system(store, rdbms=settings.rdbms)

    return config
