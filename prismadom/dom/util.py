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
Some utility functions.

"""

import bisect
import re

from .element import Element, Span


def walk(node):
    """Yield the node and all its descendants in document order, including
    value nodes that are held in attributes (like the value of an assignment
    or a function type of a field)."""
    yield node
    if isinstance(node, Element):
        for name in node._attrs:
            value = getattr(node, name)
            if isinstance(value, Element):
                yield from walk(value)
    for n in node:
        yield from walk(n)


def line_starts(text):
    """Return a list with the position of the start of every line in text."""
    return [0] + [m.end() for m in re.finditer(r'\n', text)]


def line_column(starts, pos):
    """Return the line and column (both starting at 1) of pos.

    ``starts`` is the list returned by :func:`line_starts`.

    """
    line = bisect.bisect_right(starts, pos) - 1
    return line + 1, pos - starts[line] + 1


def add_spans(node, text):
    """Set the :attr:`~.element.Element.span` of the node and all its
    descendants according to the original text.

    Only nodes with an origin are affected; the span covers the range of
    their origin tokens.

    """
    starts = line_starts(text)
    for n in walk(node):
        if n.origin:
            start = n.pos
            end = n.end - 1
            start_line, start_column = line_column(starts, start)
            end_line, end_column = line_column(starts, end)
            n.span = Span(start_line, start_column, start, end_line, end_column, end)
