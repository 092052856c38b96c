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

"""
Roster domain classes, the business logic of Roster.

This package contain a set of domain classes that abstracts the database
business logic into a high-level python syntax that can be used by the rest
of the application.

An `Object Relational Mapper <http://en.wikipedia.org/wiki/Object-relational_mapping>`_ (ORM)
is used to translate the SQL query statements to and from Python syntax.
We are currently using the `Storm <http://storm.canonical.com/>`_ ORM.

Starting point for the domain classes:

* :py:mod:`rosterlib.domain.assignment`: an employee working at a store
* :py:mod:`rosterlib.domain.base`: base infrastructure, validation and scopes
* :py:mod:`rosterlib.domain.exampledata`: example creators
* :py:mod:`rosterlib.domain.interfaces`: class interface definitions
* :py:mod:`rosterlib.domain.person`: employees
* :py:mod:`rosterlib.domain.store`: physical stores
"""
