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
The :class:`Node` class, a tree structure built on Python lists.

A Prisma schema is held in a tree of nodes: the schema contains the blocks,
a model contains its fields and a field its attributes. The children of a
node are simply the items of the list.

Nodes do not know their parent. A schema tree is owned by its root, so a node
can not silently end up in two places. Code that needs the container of a
node (like the :class:`~prismadom.builder.SchemaBuilder`) keeps it around
itself.

"""

import itertools


#: Characters used by :meth:`Node.dump`: (continue, empty, branch, last branch)
DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
}

DUMP_STYLE_DEFAULT = "round"


class Node(list):
    """A list of child nodes.

    Subclasses add their own attributes and methods. A node is always true,
    also when it has no children.

    Nodes compare by identity: ``in``, :meth:`list.index` and
    :meth:`list.remove` find the node itself and never another node that
    happens to look the same. :meth:`equals` compares the structure of two
    trees instead.

    Three operators select child nodes. Their right operand is a Node
    subclass, a tuple of classes or a node instance:

    ``node / Field``
        iterates over the children that are a Field,

    ``node // Attribute``
        iterates over all descendants that are an Attribute, in document
        order,

    ``node ^ Comment``
        iterates over the children that are *not* a Comment, so that
        ``model[:] = model ^ Comment`` removes the comments from a model.

    With a node instance as operand, a node matches when it has the same type
    and :meth:`body_equals` the instance.

    """

    __slots__ = ()

    def __init__(self, *children):
        if children:
            self.extend(children)

    def __repr__(self):
        count = len(self)
        return '<{} ({} {})>'.format(type(self).__name__, count,
                                     'child' if count == 1 else 'children')

    def __bool__(self):
        return True

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    __hash__ = object.__hash__

    def _select(self, what, nodes, invert=False):
        """Filter the nodes for the query operators."""
        if isinstance(what, Node):
            def matches(node):
                return type(node) is type(what) and node.body_equals(what)
        elif isinstance(what, (type, tuple)):
            def matches(node):
                return isinstance(node, what)
        else:
            return NotImplemented
        return (itertools.filterfalse if invert else filter)(matches, nodes)

    def __truediv__(self, what):
        return self._select(what, self)

    def __floordiv__(self, what):
        return self._select(what, self.descendants())

    def __xor__(self, what):
        return self._select(what, self, True)

    def descendants(self):
        """Iterate over the children, grandchildren etc. in document order."""
        pending = [iter(self)]
        while pending:
            for node in pending[-1]:
                yield node
                if len(node):
                    pending.append(iter(node))
                    break
            else:
                pending.pop()

    def copy(self, with_children=True):
        """Return a copy of the node, by default with copies of the children."""
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children)

    def equals(self, other):
        """Return True if the other node has the same type, an equal body and
        equal children."""
        return (type(self) is type(other)
                and len(self) == len(other)
                and self.body_equals(other)
                and all(a.equals(b) for a, b in zip(self, other)))

    def body_equals(self, other):
        """Compare the values a subclass adds, not the children.

        Called by :meth:`equals`; this implementation returns True.

        """
        return True

    def dump(self, file=None, style=None, depth=0):
        """Print the tree, one node per line, to file (default stdout).

        ``style`` selects the lines characters from :data:`DUMP_STYLES`.

        """
        cont, empty, branch, last = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        def lines(node):
            yield repr(node)
            for n, child in enumerate(node, 1):
                is_last = n == len(node)
                first, rest = (last, empty) if is_last else (branch, cont)
                for i, line in enumerate(lines(child)):
                    yield (rest if i else first) + line
        indent = empty * depth
        print('\n'.join(indent + line for line in lines(self)), file=file)
