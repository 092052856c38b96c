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

"""Functions for formatting and normalizing user input"""

import re

_NON_DIGITS_RE = re.compile('[^0-9]')


def raw_digits(value):
    """Removes everything that is not a decimal digit from *value*

    Empty values (``None`` or ``''``) are returned untouched, so the
    presence validation can still complain about them.

        >>> raw_digits('(412) 123-4567')
        '4121234567'
        >>> raw_digits(None) is None
        True
    """
    if not value:
        return value
    return _NON_DIGITS_RE.sub('', value)


def raw_phone_number(phone_number):
    return raw_digits(phone_number)


def raw_ssn(ssn):
    return raw_digits(ssn)


def format_phone_number(phone_number):
    """Formats a ten digit phone number as ``(412) 123-4567``

    Numbers with any other length are returned as raw digits.
    """
    phone = raw_phone_number(phone_number)
    if not phone or len(phone) != 10:
        return phone
    return '(%s) %s-%s' % (phone[:3], phone[3:6], phone[6:])
