# -*- coding: utf-8 -*-
#
# This file is part of `prismadom`, a library for Prisma schemas and the `.prisma` format
#
# Copyright © 2019-2021 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
The prismadom module.

Read, edit and write Prisma schema files::

    >>> import prismadom
    >>> schema = prismadom.parse(text)
    >>> prismadom.print_schema(schema, sort=True)

or, with the chainable :class:`~prismadom.builder.SchemaBuilder`::

    >>> prismadom.produce(text, lambda builder: builder.model('User').field('name'))

"""

from .pkginfo import version, version_string
from .builder import SchemaBuilder, produce
from .config import get_config
from .dom.printer import print_schema
from .dom.read import parse
from .errors import (
    PrismaError, LexError, ParseError, BuilderContractError, FinderMultiMatchError)
from .find import find_one, find_all


__all__ = (
    'parse', 'print_schema', 'produce', 'SchemaBuilder', 'find_one', 'find_all',
    'get_config', 'PrismaError', 'LexError', 'ParseError', 'BuilderContractError',
    'FinderMultiMatchError', 'version', 'version_string',
)

