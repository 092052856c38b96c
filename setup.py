# -*- coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

##
## Copyright (C) 2026 Async Open Source
##
## This program is free software; you can redistribute it and/or
## modify it under the terms of the GNU Lesser General Public License
## as published by the Free Software Foundation; either version 2
## of the License, or (at your option) any later version.
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
##
## Author(s): Stoq Team <stoq-devel@async.com.br>
##

#
# Package installation
#

from setuptools import find_packages, setup

from rosterlib import version


with open('requirements.txt') as f:
    install_requires = [l.strip() for l in f.readlines() if
                        l.strip() and not l.startswith('#')]

setup(name='rosterlib',
      version=version,
      author="Async Open Source",
      author_email="stoq-devel@async.com.br",
      description="Stores, employees and their assignments",
      long_description="""
      rosterlib keeps the records of a small chain of stores: the stores,
      the employees working for them and the assignments linking both,
      validating every record before it reaches the database.
      """,
      license="GNU LGPL 2.1",
      packages=find_packages(include=['rosterlib', 'rosterlib.*'],
                             exclude=['rosterlib.pytests*']),
      package_data={'rosterlib.database': ['sql/*.sql']},
      install_requires=install_requires,
      extras_require={'test': ['pytest']},
      zip_safe=False)
