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

import logging
import os
import platform

_system = platform.system()
log = logging.getLogger(__name__)


def get_application_dir(appname="roster"):
    """Fetches a application specific directory,
    this can be used to save temporary files and other state.
    This also creates the directory if it doesn't exist
    :returns: the application directory
    """
    if _system == 'Windows':
        appdir = os.path.join(os.environ['APPDATA'], appname)
    elif _system == 'Darwin':
        appdir = os.path.join(os.path.expanduser('~'), 'Library',
                              'Application Support', 'Roster')
    else:
        appdir = os.path.join(os.path.expanduser('~'), '.' + appname)
    if not os.path.exists(appdir):
        log.info('Creating application directory %s' % (appdir, ))
        os.makedirs(appdir)
    return appdir


def get_username():
    """Get the username of the current user"""
    import getpass
    return getpass.getuser()
