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

"""Routines for parsing the configuration file"""

from configparser import ConfigParser
import os

from rosterlib.exceptions import NoConfigurationError
from rosterlib.lib.osutils import get_application_dir
from rosterlib.lib.translation import roster_gettext

_ = roster_gettext
_config = None


class RosterConfig(object):
    domain = 'roster'

    def __init__(self):
        self._config = ConfigParser()
        self._settings = None
        self.filename = None

    def _get_config_file(self):
        filename = self.domain + '.conf'
        configdir = self.get_config_directory()
        return os.path.join(configdir, filename)

    def _open_config(self, filename):
        if not os.path.exists(filename):
            return False
        self._config.read(filename)
        return True

    #
    # Public API
    #

    def load_default(self):
        """
        Loads default configuration file one will be loaded
        """
        self.filename = self._get_config_file()
        self.load(self.filename)

    def load(self, filename):
        """
        Loads the data from a configuration file
        :param filename: filename
        """
        if not filename:
            raise TypeError("Missing filename option")
        if not self._open_config(filename):
            return
        self.filename = filename

    def load_settings(self, settings):
        """
        Load data from a DatabaseSettings object
        :param settings: the settings object
        """
        self.set('Database', 'rdbms', settings.rdbms)
        self.set('Database', 'address', settings.address or '')
        self.set('Database', 'port', str(settings.port or ''))
        self.set('Database', 'dbname', settings.dbname)
        self.set('Database', 'dbusername', settings.username or '')
        self._settings = settings

    def flush(self):
        """
        Writes the current configuration data to disk.
        """
        if not self.filename:
            self.filename = self._get_config_file()

        with open(self.filename, 'w') as f:
            self._config.write(f)

    def get_config_directory(self):
        return get_application_dir(self.domain)

    def get_settings(self):
        if self._settings:
            return self._settings

        rdbms = self.get('Database', 'rdbms')
        address = self.get('Database', 'address')
        dbname = self.get('Database', 'dbname')
        username = self.get('Database', 'dbusername')
        port = self.get('Database', 'port')
        if port:
            port = int(port)

        from rosterlib.database.settings import db_settings
        db_settings.rdbms = rdbms or db_settings.rdbms
        db_settings.address = address or db_settings.address
        db_settings.port = port or db_settings.port
        db_settings.dbname = dbname or db_settings.dbname
        db_settings.username = username or db_settings.username
        return db_settings

    def get_log_level(self):
        """The name of the level for the root logger, ``WARNING`` if
        nothing was configured"""
        return (self.get('General', 'loglevel') or 'WARNING').upper()

    def get_log_filename(self):
        return self.get('General', 'logfile')

    def get_sqldebug(self):
        value = self.get('General', 'sqldebug') or ''
        return value.lower() in ('1', 'yes', 'true', 'on')

    def set(self, section, option, value):
        if not self.has_section(section):
            self._config.add_section(section)

        self._config.set(section, option, value)

    def get(self, section, option):
        if not self.has_section(section):
            return

        if not self._config.has_option(section, option):
            return

        return self._config.get(section, option)

    def remove(self, section, option):
        if self.has_section(section):
            self._config.remove_option(section, option)

    def has_section(self, section):
        return self._config.has_section(section)

    def items(self, section):
        if not self.has_section(section):
            return []
        return self._config.items(section)

#
# General routines
#


def register_config(config):
    global _config
    _config = config


def get_config():
    """Get the registered configuration

    :raises: :exc:`NoConfigurationError` if :func:`register_config` was
      never called
    """
    if _config is None:
        raise NoConfigurationError(
            _("Roster configuration is not available. Check that the "
              "current user has a configuration file (~/.roster/roster.conf)."))
    return _config
