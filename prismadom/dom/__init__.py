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
This module defines a DOM (Document Object Model) for Prisma schema files.

The DOM is a simple tree structure where a declaration, a field, an attribute
or a value is represented by a node with possible child nodes.

This DOM is used in two ways:

1. Building a Prisma schema from scratch, using the element classes in
   :mod:`~prismadom.dom.prisma` directly or using the
   :class:`~prismadom.builder.SchemaBuilder`.

2. Transform a *parce* tree of an existing schema (see :mod:`.read`), edit
   it, and print it again using the :mod:`.printer`.

"""

