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
Writes a :class:`~.prisma.Schema` as formatted text.

The output is canonical: the members of a declaration are indented with two
spaces, the names and types of consecutive fields are aligned in columns, as
are the keys of consecutive assignments, and more than one blank line is
collapsed to one. Consecutive declarations are separated by a blank line.

The printer never modifies the tree. Example::

    >>> from prismadom.dom import read, printer
    >>> schema = read.parse('model User {\n  id Int @id\n  email String? @unique\n}')
    >>> print(printer.print_schema(schema), end='')
    model User {
      id    Int     @id
      email String? @unique
    }

"""

import contextlib
import locale
import logging
import os

from .. import config
from . import prisma


logger = logging.getLogger(__name__)

#: The order of the declarations when sorting, if not specified otherwise.
DEFAULT_SORT_ORDER = ('generator', 'datasource', 'model', 'view', 'enum')


def print_schema(schema, sort=None, locale=None, sort_order=None, newline=None):
    """Return the formatted text of the schema.

    If ``sort`` is True, the declarations are reordered, see
    :meth:`Printer.sort_blocks`. The options that are None are read from the
    configuration (see :mod:`prismadom.config`).

    """
    return Printer(sort, locale, sort_order, newline).write(schema)


def locale_names(name):
    """Return the locale names to try for a collation locale ``name``.

    A dash is replaced with an underscore, and a name without an encoding
    is also tried with ``.UTF-8`` appended, because many systems only
    install the UTF-8 variants: ``'en-US'`` gives ``['en_US', 'en_US.UTF-8']``.

    """
    name = name.replace('-', '_')
    if '.' in name or name in ('C', 'POSIX'):
        return [name]
    return [name, name + '.UTF-8']


def default_sort_key(name):
    """Case-insensitive sort key using the current ``LC_COLLATE`` setting."""
    return locale.strxfrm(name.casefold()), name


@contextlib.contextmanager
def collation(name=None):
    """Context manager yielding a key function to sort names with.

    If a locale ``name`` is given (like ``'en_US.UTF-8'``, or ``'en-US'``),
    the ``LC_COLLATE`` category is set to that locale while the context is
    active, and names are compared using its rules. Otherwise
    :func:`default_sort_key` is used, so that uppercase and lowercase names
    sort together even in the C locale. Raises :class:`locale.Error` if the
    locale is not available.

    """
    if not name:
        yield default_sort_key
        return
    saved = locale.setlocale(locale.LC_COLLATE)
    *alternatives, last = locale_names(name)
    for alternative in alternatives:
        try:
            locale.setlocale(locale.LC_COLLATE, alternative)
            break
        except locale.Error:
            logger.debug("locale %r not available", alternative)
    else:
        locale.setlocale(locale.LC_COLLATE, last)
    try:
        yield locale.strxfrm
    finally:
        locale.setlocale(locale.LC_COLLATE, saved)


def collapse_blank_lines(lines):
    """Yield the lines, replacing every run of blank lines with one empty line."""
    blank = False
    for line in lines:
        if line.strip():
            blank = False
            yield line
        elif not blank:
            blank = True
            yield ''


class Printer:
    """Writes a Schema as text.

    ``sort``, ``locale`` and ``sort_order`` determine whether and how the
    declarations are reordered (see :meth:`sort_blocks`). ``newline`` is the
    line separator, by default :data:`os.linesep`. The options that are None
    are read from the configuration.

    """
    indent = "  "

    def __init__(self, sort=None, locale=None, sort_order=None, newline=None):
        c = config.get_config()
        self.sort = c.sort if sort is None else sort
        self.locale = c.locale if locale is None else locale
        self.sort_order = c.sort_order if sort_order is None else sort_order
        self.newline = newline or c.newline or os.linesep

    def write(self, schema):
        """Return the text of the Schema."""
        blocks = self.sort_blocks(schema) if self.sort else list(schema)
        lines = []
        previous = None
        for block in blocks:
            if isinstance(block, prisma.Declaration):
                if isinstance(previous, prisma.Declaration):
                    lines.append('')
                lines.extend(self.declaration_lines(block))
            else:
                lines.extend(self.lines(block))
            previous = block
        logger.debug("printing %d blocks", len(blocks))
        return ''.join(line + self.newline for line in collapse_blank_lines(lines))

    def sort_blocks(self, blocks):
        """Return a sorted list of the blocks, leaving out the Break nodes.

        Comments keep their position; the declarations are sorted by their
        rank in the ``sort_order``, followed by the :data:`DEFAULT_SORT_ORDER`
        (kinds that appear in neither are placed last), and then by name,
        using the collation rules of the ``locale``.

        """
        blocks = [b for b in blocks if not isinstance(b, prisma.Break)]
        order = list(self.sort_order or ())
        order.extend(tag for tag in DEFAULT_SORT_ORDER if tag not in order)
        def rank(block):
            try:
                return order.index(block.tag)
            except ValueError:
                return len(order)
        slots = [i for i, b in enumerate(blocks) if isinstance(b, prisma.Declaration)]
        with collation(self.locale) as key:
            declarations = sorted((blocks[i] for i in slots),
                key=lambda b: (rank(b), key(b.name)))
        for i, block in zip(slots, declarations):
            blocks[i] = block
        return blocks

    def lines(self, node):
        """Return the list of lines of a Comment or a Break node."""
        if isinstance(node, prisma.Break):
            return ['']
        return [node.head]

    def declaration_lines(self, block):
        """Return the list of lines of a declaration, including the braces."""
        if isinstance(block, (prisma.Datasource, prisma.Generator)):
            members = self.assignment_lines(block)
        elif isinstance(block, prisma.Enum):
            members = self.enum_lines(block)
        else:
            members = self.object_lines(block)
        lines = ['{} {} {{'.format(block.keyword, block.full_name)]
        lines.extend(self.indent + line if line else '' for line in members)
        lines.append('}')
        return lines

    def object_lines(self, block):
        """Yield the lines of the body of a model, view or composite type."""
        properties = self.move_block_attributes(block, prisma.Field)
        widths = {}
        for run in self.runs(properties, prisma.Field):
            name_width = max(len(f.name) for f in run)
            type_width = max(len(f.write_type()) for f in run)
            widths.update((f, (name_width, type_width)) for f in run)
        for node in properties:
            if isinstance(node, prisma.Field):
                yield from node.docs
                yield self.field_line(node, *widths[node])
            elif isinstance(node, prisma.Attribute):
                yield node.write()
            else:
                yield from self.lines(node)

    def enum_lines(self, block):
        """Yield the lines of the body of an enum."""
        for node in self.move_block_attributes(block, prisma.Enumerator):
            if isinstance(node, prisma.Enumerator):
                yield from node.docs
                yield self.with_comment(node.write(), node.comment)
            elif isinstance(node, prisma.Attribute):
                yield node.write()
            else:
                yield from self.lines(node)

    def assignment_lines(self, block):
        """Yield the lines of the body of a datasource or generator."""
        widths = {}
        for run in self.runs(block, prisma.Assignment):
            key_width = max(len(n.key) for n in run)
            widths.update((n, key_width) for n in run)
        for node in block:
            if isinstance(node, prisma.Assignment):
                text = '{} = {}'.format(node.key.ljust(widths[node]), node.value.write())
                yield self.with_comment(text, node.comment)
            else:
                yield from self.lines(node)

    def field_line(self, field, name_width=0, type_width=0):
        """Return the line of a field, with the name and type padded to the
        specified widths."""
        parts = [field.name.ljust(name_width), field.write_type().ljust(type_width)]
        parts.extend(attr.write() for attr in field)
        return self.with_comment(' '.join(parts).strip(), field.comment)

    @staticmethod
    def with_comment(text, comment):
        """Add the trailing comment, if any, to the text."""
        return text + ' ' + comment if comment else text

    @staticmethod
    def runs(nodes, member_class):
        """Yield lists of consecutive nodes of ``member_class``.

        A run is interrupted by anything else than a documentation comment.

        """
        run = []
        for node in nodes:
            if isinstance(node, member_class):
                run.append(node)
            elif not (isinstance(node, prisma.Comment) and node.is_doc):
                if run:
                    yield run
                run = []
        if run:
            yield run

    @staticmethod
    def move_block_attributes(block, member_class):
        """Return the list of the block's nodes, with block attributes moved
        to the end if a ``member_class`` node follows one.

        A Break is inserted before the attributes if there is none.

        """
        nodes = list(block)
        attrs = [n for n in nodes if isinstance(n, prisma.Attribute)]
        if attrs:
            first = nodes.index(attrs[0])
            if any(isinstance(n, member_class) for n in nodes[first:]):
                nodes = [n for n in nodes if not isinstance(n, prisma.Attribute)]
                if nodes and not isinstance(nodes[-1], prisma.Break):
                    nodes.append(prisma.Break())
                nodes.extend(attrs)
        return nodes

