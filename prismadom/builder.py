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
A chainable interface to build and edit a Schema.

A :class:`SchemaBuilder` keeps a cursor: the *subject*, the node that was
addressed most recently, and its *parent*, the block the subject lives in.
Methods that name a declaration, field or enumerator find it (or create it if
it does not exist yet) and move the cursor to it; other methods change the
subject or its parent. Example::

    >>> from prismadom import SchemaBuilder
    >>> builder = SchemaBuilder()
    >>> builder.model('User').field('id', 'Int').attribute('id') \
    ...     .field('email').attribute('unique').print()
    'model User {\n  id    Int    @id\n  email String @unique\n}\n'

Calling a method while the cursor is not on a suitable node raises a
:class:`~prismadom.errors.BuilderContractError`.

"""

import logging

from . import find
from .dom import element, prisma, read
from .dom.printer import print_schema
from .errors import BuilderContractError


logger = logging.getLogger(__name__)

OBJECTS = (prisma.Model, prisma.View, prisma.CompositeType)
CONFIGS = (prisma.Datasource, prisma.Generator)
BLOCKS = OBJECTS + (prisma.Enum,) + CONFIGS


def to_value(arg):
    """Return a value node for a Python value.

    A string is read as Prisma source text, so ``'"text"'`` becomes a String,
    ``'now()'`` a Function and ``'Role'`` an Identifier. A bool becomes a
    Boolean, an int or float a Number, a list or tuple an Array and a dict
    with a ``'name'`` key a Function (with the arguments in the optional
    ``'function'`` key). Value nodes are returned unchanged.

    """
    if isinstance(arg, element.Element):
        return arg
    elif isinstance(arg, bool):
        return prisma.Boolean(arg)
    elif isinstance(arg, (int, float)):
        return prisma.Number(arg)
    elif isinstance(arg, str):
        return read.value(arg)
    elif isinstance(arg, (list, tuple)):
        return prisma.Array(*map(to_value, arg))
    elif isinstance(arg, dict) and 'name' in arg:
        return prisma.Function(arg['name'], *to_arguments(arg.get('function', ())))
    raise TypeError("can't convert to a value: {!r}".format(arg))


def to_arguments(args):
    """Return a list of argument nodes.

    ``args`` is a list of values (see :func:`to_value`), where a dict without
    a ``'name'`` key adds a named argument for every item. A dict given
    instead of a list always is a mapping of named arguments, even if it has
    a ``'name'`` key. A single string, number, boolean or value node is one argument.

    """
    if isinstance(args, (str, bool, int, float, element.Element)):
        args = [args]
    elif isinstance(args, dict):
        return [prisma.KeyValue(key, value=to_value(value)) for key, value in args.items()]
    nodes = []
    for arg in args:
        if isinstance(arg, dict) and 'name' not in arg:
            nodes.extend(prisma.KeyValue(key, value=to_value(value)) for key, value in arg.items())
        else:
            nodes.append(to_value(arg))
    return nodes


def split_name(name):
    """Split an attribute name like ``'db.VarChar'`` in a (group, name) tuple."""
    group, dot, name = name.lstrip('@').rpartition('.')
    return group or None, name


class SchemaBuilder:
    """Builds or edits a Schema.

    ``source`` may be a :class:`~prismadom.dom.prisma.Schema` to edit or the
    text of a schema, which is parsed (by default an empty schema is
    created). All methods that do not return something else return the
    builder itself, so calls can be chained.

    """
    def __init__(self, source=''):
        self._schema = source if isinstance(source, prisma.Schema) else read.parse(source)
        self._subject = None
        self._parent = None

    @property
    def schema(self):
        """The Schema that is being built."""
        return self._schema

    @property
    def subject(self):
        """The node that was addressed most recently."""
        return self._subject

    @property
    def parent(self):
        """The block the subject lives in, if the subject is not a block."""
        return self._parent

    def _container(self, kinds, message):
        """Return the subject or else the parent if it is one of ``kinds``."""
        for node in self._subject, self._parent:
            if isinstance(node, kinds):
                return node
        raise BuilderContractError(message)

    def _block(self, element_class, name):
        """Find or create the declaration and move the cursor to it."""
        for block in self._schema / element_class:
            if block.name == name:
                break
        else:
            block = element_class(name)
            self._schema.append(block)
            logger.debug("created %s %r", block.tag, name)
        self._subject, self._parent = block, None
        return block

    ## declarations
    def datasource(self, provider, url):
        """Set the datasource, replacing an existing one.

        ``url`` is a connection string, or a dict ``{'env': NAME}`` to read
        the url from the environment variable NAME.

        """
        if isinstance(url, dict):
            url = prisma.Function('env', prisma.String(url['env']))
        else:
            url = prisma.String(url)
        datasource = prisma.Datasource('db',
            prisma.Assignment('url', value=url),
            prisma.Assignment('provider', value=prisma.String(provider)))
        for i, block in enumerate(self._schema):
            if isinstance(block, prisma.Datasource):
                self._schema[i] = datasource
                break
        else:
            self._schema.append(datasource)
        self._subject, self._parent = datasource, None
        return self

    def generator(self, name, provider=None):
        """Find or create a generator.

        A new generator gets the ``provider``, by default
        ``'prisma-client-js'``; the provider of an existing generator is only
        changed if a ``provider`` is given.

        """
        generator = self._block(prisma.Generator, name)
        if provider is not None or not len(generator):
            self.assignment('provider', provider or 'prisma-client-js')
        return self

    def model(self, name):
        """Find or create a model."""
        self._block(prisma.Model, name)
        return self

    def view(self, name):
        """Find or create a view."""
        self._block(prisma.View, name)
        return self

    def type(self, name):
        """Find or create a composite type."""
        self._block(prisma.CompositeType, name)
        return self

    def enum(self, name, enumerators=()):
        """Find or create an enum, and add the enumerators it does not have yet."""
        enum = self._block(prisma.Enum, name)
        for enumerator in enumerators:
            if find.find_one(enum, prisma.Enumerator, enumerator) is None:
                enum.append(prisma.Enumerator(enumerator))
        return self

    def drop(self, name):
        """Remove all declarations with the name."""
        schema = self._schema
        dropped = [b for b in schema if isinstance(b, prisma.Declaration) and b.name == name]
        if dropped:
            schema[:] = (n for n in schema if n not in dropped)
            if self._subject in dropped or self._parent in dropped:
                self._subject = self._parent = None
        return self

    ## members of declarations
    def field(self, name, field_type=None):
        """Find or create a field in the current model, view or type.

        A new field gets the type ``'String'`` if ``field_type`` is not given.
        The type may have a ``[]`` or ``?`` suffix, or be a function, like
        ``'Unsupported("circle")'``.

        """
        obj = self._container(OBJECTS, "subject must be a model, view or type")
        field = find.find_one(obj, prisma.Field, name)
        if field is None:
            field = prisma.Field(name)
            obj.append(field)
            self._set_field_type(field, field_type or 'String')
        elif field_type is not None:
            self._set_field_type(field, field_type)
        self._subject, self._parent = field, obj
        return self

    @staticmethod
    def _set_field_type(field, field_type):
        """Set the type and the suffix flags of the field."""
        field.array = field.optional = False
        if isinstance(field_type, str):
            if field_type.endswith('[]'):
                field.array = True
                field_type = field_type[:-2]
            elif field_type.endswith('?'):
                field.optional = True
                field_type = field_type[:-1]
            if '(' in field_type:
                field_type = read.value(field_type)
        field.field_type = field_type

    def remove_field(self, name):
        """Remove the fields with the name from the current model, view or type."""
        obj = self._container(OBJECTS, "subject must be a model, view or type")
        obj[:] = (n for n in obj if not (isinstance(n, prisma.Field) and n.name == name))
        if self._subject is not obj and self._subject not in obj:
            self._subject, self._parent = obj, None
        return self

    def enumerator(self, name, value=None):
        """Find or create an enumerator in the current enum."""
        enum = self._container(prisma.Enum, "subject must be an enum")
        enumerator = find.find_one(enum, prisma.Enumerator, name)
        if enumerator is None:
            enumerator = prisma.Enumerator(name)
            enum.append(enumerator)
        if value is not None:
            enumerator.value = to_value(value)
        self._subject, self._parent = enumerator, enum
        return self

    def assignment(self, key, value):
        """Set the value of a key in the current datasource or generator.

        A string value is written as a string literal; other values are
        converted with :func:`to_value`.

        """
        if not isinstance(self._subject, CONFIGS):
            raise BuilderContractError("subject must be a datasource or generator")
        value = prisma.String(value) if isinstance(value, str) else to_value(value)
        assignment = find.find_one(self._subject, prisma.Assignment, key)
        if assignment is None:
            self._subject.append(prisma.Assignment(key, value=value))
        else:
            assignment.value = value
        return self

    ## attributes
    def attribute(self, name, args=None):
        """Add or update an attribute of the current field or enumerator.

        The ``name`` may have a group prefix, like ``'db.VarChar'``. The
        ``args``, converted with :func:`to_arguments`, replace the arguments
        of an existing attribute.

        """
        subject = self._subject
        if not isinstance(subject, (prisma.Field, prisma.Enumerator)):
            raise BuilderContractError("subject must be a field or an enumerator")
        group, name = split_name(name)
        attribute = self._find_attribute(subject, group, name)
        if attribute is None:
            attribute = prisma.Attribute(name, group=group, kind='field')
            subject.append(attribute)
        if args is not None:
            attribute[:] = to_arguments(args)
        return self

    def remove_attribute(self, name):
        """Remove the attribute from the current field or enumerator."""
        subject = self._subject
        if not isinstance(subject, (prisma.Field, prisma.Enumerator)):
            raise BuilderContractError("subject must be a field or an enumerator")
        group, name = split_name(name)
        subject[:] = (a for a in subject if not (a.group == group and a.name == name))
        return self

    def block_attribute(self, name, args=None):
        """Add or update a block attribute (``@@``) of the current model,
        view, type or enum, and move the cursor to the block.

        A string argument becomes a string literal (``@@map("users")``), a
        list becomes an array of names (``@@id([a, b])``), and a dict adds
        named arguments.

        """
        block = self._container(OBJECTS + (prisma.Enum,), "subject must be an object or enum")
        group, name = split_name(name)
        attribute = self._find_attribute(block / prisma.Attribute, group, name)
        if attribute is None:
            attribute = prisma.Attribute(name, group=group, kind='object')
            block.append(attribute)
        if isinstance(args, str):
            attribute[:] = [prisma.String(args)]
        elif isinstance(args, (list, tuple)):
            attribute[:] = [to_value(args)]
        elif args is not None:
            attribute[:] = to_arguments(args)
        self._subject, self._parent = block, None
        return self

    @staticmethod
    def _find_attribute(attributes, group, name):
        for attribute in attributes:
            if attribute.group == group and attribute.name == name:
                return attribute

    ## comments and blank lines
    def comment(self, text, doc=False):
        """Add a comment to the current block; a documentation comment
        (``///``) if ``doc`` is True."""
        block = self._container(BLOCKS, "subject must be a declaration")
        block.append(prisma.Comment(('/// ' if doc else '// ') + text))
        return self

    def break_(self):
        """Add a blank line to the current block."""
        self._container(BLOCKS, "subject must be a declaration").append(prisma.Break())
        return self

    def schema_comment(self, text, doc=False):
        """Add a comment at the end of the schema."""
        self._schema.append(prisma.Comment(('/// ' if doc else '// ') + text))
        return self

    ## other
    def with_current(self, callback):
        """Call ``callback`` with the current subject, to edit it directly."""
        callback(self._subject)
        return self

    def find_one(self, kind, name=None, within=None):
        """Return the node found by :func:`~prismadom.find.find_one` in the schema."""
        return find.find_one(self._schema, kind, name, within)

    def find_all(self, kind, name=None, within=None):
        """Return the nodes found by :func:`~prismadom.find.find_all` in the schema."""
        return find.find_all(self._schema, kind, name, within)

    def print(self, **options):
        """Return the text of the schema; see :func:`~prismadom.dom.printer.print_schema`."""
        return print_schema(self._schema, **options)


def produce(text, edit, **options):
    """Parse the text, call ``edit`` with a :class:`SchemaBuilder`, and
    return the printed result.

    The keyword ``options`` are given to
    :func:`~prismadom.dom.printer.print_schema`.

    """
    builder = SchemaBuilder(text)
    edit(builder)
    return builder.print(**options)

