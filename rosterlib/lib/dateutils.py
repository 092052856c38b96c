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

"""Utilities for working with dates"""

import datetime

from dateutil.relativedelta import relativedelta


def localnow():
    """Get the current date according to the local timezone.
    This is relative to the clock on the computer where Roster is run.

    :rtype: datetime.datetime object
    :returns: right now according to the current locale
    """
    return datetime.datetime.now()


def localtoday():
    """Get the beginning of the current date according to the local timezone.
    This is relative to the clock on the computer where Roster is run.

    :rtype: datetime.datetime object
    :returns: today according to the current locale
    """
    return localnow().replace(hour=0,
                              minute=0,
                              second=0,
                              microsecond=0)


def years_ago(years, today=None):
    """The date *years* before *today*

    February 29th becomes February 28th on non leap years.

    :param years: the number of years
    :param today: the reference date or datetime, defaults to
      :func:`localtoday`
    :rtype: datetime.date object
    """
    if today is None:
        today = localtoday()
    if isinstance(today, datetime.datetime):
        today = today.date()
    return today - relativedelta(years=years)
