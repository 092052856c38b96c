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

"""Validation rules and the structure that collects their violations"""

import collections
import re

from rosterlib.lib.translation import roster_gettext

_ = roster_gettext

#: States where we have stores
STATES = ('PA', 'OH', 'WV')

_PHONE_NUMBER_RE = re.compile('[0-9]{10}')
_SSN_RE = re.compile('[0-9]{9}')
_ZIP_CODE_RE = re.compile('[0-9]{5}')

#: A single broken rule. *rule* is one of ``presence``, ``format``,
#: ``inclusion``, ``uniqueness`` or ``range``
Violation = collections.namedtuple('Violation', 'field rule message')


#
# Value validators
#


def is_blank(value):
    """``None``, empty strings and strings with only whitespace are blank"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_phone_number(phone_number):
    """A phone number is exactly 10 digits, nothing else"""
    return bool(phone_number and _PHONE_NUMBER_RE.fullmatch(phone_number))


def validate_ssn(ssn):
    """A social security number is exactly 9 digits, nothing else"""
    return bool(ssn and _SSN_RE.fullmatch(ssn))


def validate_zip_code(zip_code):
    """A zip code is exactly 5 digits, nothing else"""
    return bool(zip_code and _ZIP_CODE_RE.fullmatch(zip_code))


def validate_state(state):
    return state in STATES


def validate_date_range(start_date, end_date):
    """Check that a date interval is not reversed. An open interval
    (either side being ``None``) is always valid."""
    if start_date is None or end_date is None:
        return True
    return end_date >= start_date


#
# Validation results
#


class ValidationErrors(object):
    """The outcome of validating a domain object.

    Violations are grouped by field name, in the order they were found::

        >>> errors = ValidationErrors()
        >>> errors.valid
        True
        >>> errors.add('zip_code', 'format', 'is invalid')
        >>> errors.valid
        False
        >>> errors['zip_code']
        ['is invalid']
    """

    def __init__(self):
        self.violations = []

    def __len__(self):
        return len(self.violations)

    def __bool__(self):
        return bool(self.violations)

    def __contains__(self, field):
        return any(v.field == field for v in self.violations)

    def __getitem__(self, field):
        return [v.message for v in self.violations if v.field == field]

    def __repr__(self):
        return '<ValidationErrors %r>' % (dict(self.messages), )

    #
    # Public API
    #

    @property
    def valid(self):
        return not self.violations

    @property
    def messages(self):
        """A field -> list of messages mapping"""
        messages = collections.OrderedDict()
        for violation in self.violations:
            messages.setdefault(violation.field, []).append(violation.message)
        return messages

    def add(self, field, rule, message):
        self.violations.append(Violation(field, rule, message))

    def get_rules(self, field):
        """Get the names of the rules *field* violated"""
        return [v.rule for v in self.violations if v.field == field]

    def full_messages(self):
        """Messages prefixed by a humanized field name, eg
        ``Zip code is invalid``"""
        return ['%s %s' % (v.field.replace('_', ' ').capitalize(), v.message)
                for v in self.violations]
