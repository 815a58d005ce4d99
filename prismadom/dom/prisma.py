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
Elements that make up a Prisma schema.

A :class:`Schema` contains the blocks: :class:`Datasource`, :class:`Generator`,
:class:`Model`, :class:`View`, :class:`CompositeType`, :class:`Enum`,
:class:`Comment` and :class:`Break` nodes. A Break stands for a blank line.

Scalar parts of a node (the type of a field, the value of an assignment, the
trailing comment of a line) are attributes, everything that is an ordered list
is a child node. For example::

    >>> from prismadom.dom import read
    >>> read.parse('model User {\n  id Int @id @default(autoincrement())\n}\n').dump()
    <prisma.Schema (1 child)>
     ╰╴<prisma.Model 'User' (1 child)>
        ╰╴<prisma.Field 'id' (2 children)>
           ├╴<prisma.Attribute 'id'>
           ╰╴<prisma.Attribute 'default' (1 child)>
              ╰╴<prisma.Function 'autoincrement'>

Literal values know how to write themselves back using :meth:`write`.

"""

import re

from . import element


_ESCAPES = {
    'b': '\b', 'f': '\f', 'n': '\n', 'r': '\r', 't': '\t', 'v': '\v',
    '"': '"', '\\': '\\', '/': '/',
}

_WRITE_ESCAPES = {v: '\\' + k for k, v in _ESCAPES.items() if k != '/'}


def unescape(text):
    """Return the text with backslash escapes replaced."""
    def repl(m):
        if m.group(1):
            return chr(int(m.group(1), 16))
        return _ESCAPES.get(m.group(2), m.group(2))
    return re.sub(r'\\(?:u([0-9a-fA-F]{4})|(.))', repl, text)


def escape(text):
    """Return the text with quotes, backslashes and control characters escaped."""
    def repl(m):
        c = m.group()
        return _WRITE_ESCAPES.get(c) or '\\u{:04x}'.format(ord(c))
    return re.sub(r'[\\"\x00-\x1f]', repl, text)


## Schema and blocks

class Schema(element.Element):
    """The root of a Prisma schema; contains the blocks."""
    tag = 'schema'

    @property
    def blocks(self):
        """The blocks of the schema (the schema itself)."""
        return self

    def write(self, **options):
        """Return the formatted schema text.

        The keyword arguments are the options of
        :func:`~prismadom.dom.printer.print_schema`.

        """
        from .printer import print_schema
        return print_schema(self, **options)


class Comment(element.TextElement):
    """A comment; the head is the full text, including the slashes."""
    tag = 'comment'

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and head.startswith('//')

    @property
    def text(self):
        return self.head

    @property
    def is_doc(self):
        """True if this is a documentation comment (``///``)."""
        return self.head.startswith('///')

    def write(self):
        return self.head


class Break(element.Element):
    """A blank line."""
    tag = 'break'


class Declaration(element.TextElement):
    """Base class for the top-level blocks with a name and a body.

    The optional ``group`` attribute holds a namespace prefix
    (``model auth.User { ... }``).

    """
    keyword = None
    group = None
    _attrs = ('group',)

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @property
    def name(self):
        return self.head

    @name.setter
    def name(self, name):
        self.head = name

    @property
    def full_name(self):
        """The name, prefixed with the group if set."""
        return self.group + '.' + self.head if self.group else self.head


class Object(Declaration):
    """Base class for model, view and composite type declarations.

    Contains :class:`Field`, :class:`Attribute` (with ``kind`` ``'object'``),
    :class:`Comment` and :class:`Break` nodes.

    """
    @property
    def properties(self):
        """The properties of the object (the object itself)."""
        return self

    @property
    def fields(self):
        """A list of the fields."""
        return list(self / Field)


class Model(Object):
    """A model declaration."""
    tag = keyword = 'model'


class View(Object):
    """A view declaration."""
    tag = keyword = 'view'


class CompositeType(Object):
    """A composite type declaration."""
    tag = keyword = 'type'


class Enum(Declaration):
    """An enum declaration; contains :class:`Enumerator`, :class:`Attribute`,
    :class:`Comment` and :class:`Break` nodes."""
    tag = keyword = 'enum'

    @property
    def enumerators(self):
        """The members of the enum (the enum itself)."""
        return self


class Datasource(Declaration):
    """A datasource declaration; contains :class:`Assignment`,
    :class:`Comment` and :class:`Break` nodes."""
    tag = keyword = 'datasource'

    @property
    def assignments(self):
        return self


class Generator(Declaration):
    """A generator declaration; contains :class:`Assignment`,
    :class:`Comment` and :class:`Break` nodes."""
    tag = keyword = 'generator'

    @property
    def assignments(self):
        return self


## Members of the blocks

class Field(element.TextElement):
    """A field of a model, view or composite type.

    The head is the name, the children are the field's :class:`Attribute`
    nodes. The ``field_type`` is a string or a :class:`Function`; ``array``
    and ``optional`` are set for the ``[]`` and ``?`` suffixes. ``comment``
    holds a trailing comment and ``docs`` the texts of the doc comments
    preceding the field.

    """
    tag = 'field'
    field_type = 'String'
    array = False
    optional = False
    comment = None
    docs = ()
    _attrs = ('field_type', 'array', 'optional', 'comment', 'docs')

    @property
    def name(self):
        return self.head

    @name.setter
    def name(self, name):
        self.head = name

    @property
    def attributes(self):
        return self

    def write_type(self):
        """Return the type with its suffix, as written in the source."""
        t = self.field_type
        text = t.write() if isinstance(t, element.Element) else t
        if self.array:
            text += '[]'
        elif self.optional:
            text += '?'
        return text


class Enumerator(element.TextElement):
    """A member of an enum.

    The head is the name, the children are :class:`Attribute` nodes; the
    optional ``value`` is a value node. ``comment`` and ``docs`` behave like
    those of a :class:`Field`.

    """
    tag = 'enumerator'
    value = None
    comment = None
    docs = ()
    _attrs = ('value', 'comment', 'docs')

    @property
    def name(self):
        return self.head

    @name.setter
    def name(self, name):
        self.head = name

    @property
    def attributes(self):
        return self

    def write(self):
        text = self.head
        if self.value is not None:
            text += ' = ' + self.value.write()
        return ' '.join([text, *(attr.write() for attr in self)])


class Assignment(element.TextElement):
    """An assignment in a datasource or generator; the head is the key."""
    tag = 'assignment'
    value = None
    comment = None
    _attrs = ('value', 'comment')

    @property
    def key(self):
        return self.head

    @key.setter
    def key(self, key):
        self.head = key

    name = key


class Attribute(element.TextElement):
    """A field attribute (``@id``) or a block attribute (``@@id([a, b])``).

    The head is the name, ``group`` the optional prefix (``db`` in
    ``@db.VarChar(200)``), and ``kind`` is ``'field'`` or ``'object'``. The
    children are the arguments: value nodes or :class:`KeyValue` nodes.

    """
    tag = 'attribute'
    group = None
    kind = 'field'
    _attrs = ('group', 'kind')

    @property
    def name(self):
        return self.head

    @property
    def full_name(self):
        """The name, prefixed with the group if set."""
        return self.group + '.' + self.head if self.group else self.head

    @property
    def args(self):
        return self

    def write(self):
        text = ('@' if self.kind == 'field' else '@@') + self.full_name
        if len(self):
            text += '(' + ', '.join(arg.write() for arg in self) + ')'
        return text


class KeyValue(element.TextElement):
    """A named argument; the head is the key and ``value`` a value node."""
    tag = 'keyValue'
    value = None
    _attrs = ('value',)

    @property
    def key(self):
        return self.head

    def write(self):
        return '{}: {}'.format(self.head, self.value.write())


## Values

class String(element.TextElement):
    """A string; the head is the unescaped text."""
    tag = 'string'

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @classmethod
    def read_head(cls, text):
        """Return the value of a string literal, including the quotes."""
        return unescape(text[1:-1])

    def write(self):
        return '"{}"'.format(escape(self.head))


class Number(element.TextElement):
    """A number; the head is an int or a float."""
    tag = 'number'

    @classmethod
    def check_head(cls, head):
        return isinstance(head, (int, float)) and not isinstance(head, bool)

    @classmethod
    def read_head(cls, text):
        return float(text) if re.search(r'[.eE]', text) else int(text)

    def write(self):
        return str(self.head)


class Boolean(element.TextElement):
    """A boolean; the head is True or False."""
    tag = 'boolean'

    @classmethod
    def check_head(cls, head):
        return isinstance(head, bool)

    def write(self):
        return 'true' if self.head else 'false'


class Identifier(element.TextElement):
    """A bare name, like an enum value, a field name or ``null``."""
    tag = 'identifier'

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    def write(self):
        return self.head


class Function(element.TextElement):
    """A function call; the head is the name, the children are the arguments."""
    tag = 'function'

    @property
    def name(self):
        return self.head

    @property
    def args(self):
        return self

    def write(self):
        return '{}({})'.format(self.head, ', '.join(arg.write() for arg in self))


class Array(element.Element):
    """An array; the children are the values."""
    tag = 'array'

    def write(self):
        return '[{}]'.format(', '.join(value.write() for value in self))


#: All element classes that have a tag, by tag.
TAGS = {cls.tag: cls for cls in (
    Schema, Comment, Break, Model, View, CompositeType, Enum, Datasource,
    Generator, Field, Enumerator, Assignment, Attribute, KeyValue, String,
    Number, Boolean, Identifier, Function, Array)}

