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
The :class:`Element` base class of all nodes in a Prisma schema tree.

Every Element has a :attr:`~Element.tag`, the name of its kind (``'model'``,
``'field'``, ``'string'``...), child nodes, and the extra attributes its
class lists in ``_attrs``, like the type of a field or the value of an
assignment. A :class:`TextElement` adds a ``head``: the name of a
declaration, field or attribute, or the value of a literal.

Elements are created by calling the class, nesting the children in the call,
so a complete schema can be written as one expression. The reader uses
:meth:`~Element.with_origin` instead, which keeps the tokens the element was
read from; from those the :attr:`~Element.span` in the source text is
computed.

"""

import collections
import reprlib

from ..node import Node


#: A Span describes the location of a node in the source text. Lines and
#: columns start at 1, offsets at 0; the end values point to the last
#: character, inclusive.
Span = collections.namedtuple("Span",
    "start_line start_column start_offset end_line end_column end_offset")


def values_equal(a, b):
    """Compare two attribute values, comparing nodes structurally."""
    if isinstance(a, Node):
        return a.equals(b)
    elif isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(map(values_equal, a, b))
    return a == b


def copy_value(value):
    """Copy an attribute value, copying nodes."""
    if isinstance(value, Node):
        return value.copy()
    elif isinstance(value, list):
        return [copy_value(v) for v in value]
    return value


class Element(Node):
    """Base class for all element types.

    Child elements can be specified directly as arguments to the constructor.
    Keyword arguments set the extra attributes of the element, which must be
    named in the ``_attrs`` class attribute to be copied and compared.

    """
    tag = None          #: the tagged type name of this element
    origin = ()         #: the tokens this element was read from, if kept
    span = None         #: the :class:`Span` in the source text, if tracked

    _attrs = ()

    def __init__(self, *children, **attrs):
        super().__init__(*children)
        for attribute, value in attrs.items():
            setattr(self, attribute, value)

    @classmethod
    def with_origin(cls, origin, *args, **attrs):
        """Create the element, remembering the origin tokens."""
        node = cls(*args, **attrs)
        node.origin = tuple(origin)
        return node

    @classmethod
    def from_origin(cls, origin, *args, **attrs):
        """Create the element, forgetting the origin tokens."""
        return cls(*args, **attrs)

    @property
    def pos(self):
        """The position of the first origin token, or None."""
        if self.origin:
            return self.origin[0].pos

    @property
    def end(self):
        """The end position of the last origin token, or None."""
        if self.origin:
            return self.origin[-1].end

    def get_attrs(self):
        """Return a dictionary with the extra attributes that are set."""
        return {name: getattr(self, name) for name in self._attrs
                if name in self.__dict__}

    def body_equals(self, other):
        """Compare the extra attributes."""
        return all(values_equal(getattr(self, name), getattr(other, name))
                   for name in self._attrs)

    def _copy_attrs(self):
        return {name: copy_value(value) for name, value in self.get_attrs().items()}

    def copy(self, with_children=True):
        """Return a copy without the origin; by default the children are
        copied as well."""
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children, **self._copy_attrs())

    def repr_head(self):
        """Return the text to show for the head in the repr, or None."""
        return None

    def __repr__(self):
        parts = ["{}.{}".format(type(self).__module__.rpartition('.')[2], type(self).__name__)]
        head = self.repr_head()
        if head is not None:
            parts.append(head)
        count = len(self)
        if count:
            parts.append("({} {})".format(count, 'child' if count == 1 else 'children'))
        if self.origin:
            parts.append('[{}:{}]'.format(self.pos, self.end))
        return "<{}>".format(" ".join(parts))

    def write(self):
        """Return the source text of this element.

        Only implemented for elements that fit on one line; declarations are
        written by the :class:`~prismadom.dom.printer.Printer`.

        """
        raise NotImplementedError


class TextElement(Element):
    """An Element with a ``head`` value, given as first constructor argument.

    The :meth:`check_head` class method validates the head, so that forgetting
    it (and passing a child node in its place) raises a TypeError.

    """
    def __init__(self, head, *children, **attrs):
        if not self.check_head(head):
            raise TypeError("invalid head value for {}: {!r}".format(type(self).__name__, head))
        self.head = head
        super().__init__(*children, **attrs)

    @classmethod
    def check_head(cls, head):
        """Return True if the head value is valid; by default anything but a node."""
        return not isinstance(head, Node)

    def repr_head(self):
        return reprlib.repr(self.head)

    def body_equals(self, other):
        """Compare the head and the extra attributes."""
        return self.head == other.head and super().body_equals(other)

    def copy(self, with_children=True):
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(self.head, *children, **self._copy_attrs())
