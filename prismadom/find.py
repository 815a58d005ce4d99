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


r"""
Find nodes by their type and name.

The functions in this module work on any iterable of nodes, like a
:class:`~prismadom.dom.prisma.Schema`, the properties of a model or the
attributes of a field, so they can be combined to search nested scopes::

    >>> from prismadom import parse, find_one
    >>> schema = parse('model User {\n  id Int @id\n}')
    >>> user = find_one(schema, 'model', name='User')
    >>> find_one(schema, 'field', name='id', within=user)
    <prisma.Field 'id' (1 child)>

"""

import re

from .dom import prisma
from .errors import FinderMultiMatchError


def kind_class(kind):
    """Return the element class for a kind, which may be a tag or a class."""
    if isinstance(kind, str):
        try:
            return prisma.TAGS[kind]
        except KeyError:
            raise ValueError("unknown node kind: {!r}".format(kind)) from None
    return kind


def name_matches(node, name):
    """Return True if the node's name (the key for an assignment) matches.

    ``name`` is a string, which must be equal, or a compiled regular expression,
    which must be found in the name.

    """
    node_name = getattr(node, 'key' if isinstance(node, prisma.Assignment) else 'name', None)
    if node_name is None:
        return False
    elif isinstance(name, re.Pattern):
        return name.search(node_name) is not None
    return node_name == name


def find_all(collection, kind, name=None, within=None):
    """Return the list of nodes of ``kind`` in the collection.

    ``kind`` is an element class (or tuple of classes) or a tag like
    ``'model'``. If ``name`` is given, only the nodes with a matching name
    are returned. If ``within`` is given, that collection is searched instead.

    """
    cls = kind_class(kind)
    source = collection if within is None else within
    return [n for n in source
            if isinstance(n, cls) and (name is None or name_matches(n, name))]


def find_one(collection, kind, name=None, within=None):
    """Return the node of ``kind`` in the collection, or None.

    The arguments are the same as for :func:`find_all`. Raises
    :class:`~prismadom.errors.FinderMultiMatchError` if more than one node
    matches.

    """
    nodes = find_all(collection, kind, name, within)
    if len(nodes) > 1:
        cls = kind_class(kind)
        raise FinderMultiMatchError("found multiple blocks with [type={}]".format(
            getattr(cls, 'tag', None) or kind))
    return nodes[0] if nodes else None

