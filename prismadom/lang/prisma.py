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
Parce language definition for Prisma schema files, and the transforms that
build a :class:`~prismadom.dom.prisma.Schema` from the parsed text.

The :attr:`Prisma.root` lexicon only knows about the declaration keywords,
comments and newlines. A keyword switches to a header lexicon, and the opening
brace of the declaration to the body lexicon for that kind of block, where the
keywords are just ordinary identifiers. The closing brace pops both.

The transform checks the structure of every context and raises a
:class:`~prismadom.errors.ParseError` at the first problem.

"""

import parce.action as a
from parce import Language, lexicon, default_action, default_target, skip
from parce.rule import bygroup
from parce.transform import Transform
from parce.util import Dispatcher

from ..dom import prisma
from ..errors import ParseError


IDENTIFIER = r'[A-Za-z][\w-]*'
STRING = r'"(?:[^"\\\r\n]|\\(?:[bfnrtv"\\/]|u[0-9a-fA-F]{4}))*"'
NUMBER = r'-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?'
CONSTANT = r'(?:true|false|null)(?![\w-])'
ATTRIBUTE = r'(@@?)(?:(' + IDENTIFIER + r')(?:(\.)(' + IDENTIFIER + r'))?)?'

# the token actions the transform looks at
LineBreak = a.Whitespace.LineBreak
DocComment = a.Comment.Doc
Separator = a.Delimiter.Separator
Suffix = a.Delimiter.Suffix


class Prisma(Language):
    """Prisma schema language definition."""

    @lexicon
    def root(cls):
        yield r'\bdatasource(?![\w-])', a.Keyword, cls.datasource
        yield r'\bgenerator(?![\w-])', a.Keyword, cls.generator
        yield r'\bmodel(?![\w-])', a.Keyword, cls.model
        yield r'\bview(?![\w-])', a.Keyword, cls.view
        yield r'\btype(?![\w-])', a.Keyword, cls.type
        yield r'\benum(?![\w-])', a.Keyword, cls.enum
        yield from cls.layout()
        yield default_action, a.Invalid

    # declaration headers: keyword, name, opening brace
    @lexicon(consume=True)
    def datasource(cls):
        yield from cls.header(cls.config_body)

    @lexicon(consume=True)
    def generator(cls):
        yield from cls.header(cls.config_body)

    @lexicon(consume=True)
    def model(cls):
        yield from cls.header(cls.object_body)

    @lexicon(consume=True)
    def view(cls):
        yield from cls.header(cls.object_body)

    @lexicon(consume=True)
    def type(cls):
        yield from cls.header(cls.object_body)

    @lexicon(consume=True)
    def enum(cls):
        yield from cls.header(cls.enum_body)

    @classmethod
    def header(cls, body):
        yield r'[ \t]+', skip
        yield r'\{', a.Delimiter.Bracket, body
        yield IDENTIFIER, a.Name.Class
        yield r'\.', a.Delimiter.Dot
        yield default_target, -1

    # declaration bodies
    @lexicon(consume=True)
    def object_body(cls):
        yield r'\}', a.Delimiter.Bracket, -2
        yield ATTRIBUTE, bygroup(a.Delimiter.Attribute, a.Name.Attribute,
                                 a.Delimiter.Dot, a.Name.Attribute), cls.attribute
        yield IDENTIFIER, a.Name.Variable, cls.field
        yield from cls.layout()
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def enum_body(cls):
        yield r'\}', a.Delimiter.Bracket, -2
        yield ATTRIBUTE, bygroup(a.Delimiter.Attribute, a.Name.Attribute,
                                 a.Delimiter.Dot, a.Name.Attribute), cls.attribute
        yield IDENTIFIER, a.Name.Variable, cls.enumerator
        yield from cls.layout()
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def config_body(cls):
        yield r'\}', a.Delimiter.Bracket, -2
        yield IDENTIFIER, a.Name.Variable, cls.assignment
        yield from cls.layout()
        yield default_action, a.Invalid

    # the lines in the bodies
    @lexicon(consume=True)
    def field(cls):
        yield r'[ \t]+', skip
        yield r'\[\]|\?', Suffix
        yield ATTRIBUTE, bygroup(a.Delimiter.Attribute, a.Name.Attribute,
                                 a.Delimiter.Dot, a.Name.Attribute), cls.attribute
        yield from cls.comments()
        yield from cls.values()
        yield default_target, -1

    @lexicon(consume=True)
    def enumerator(cls):
        yield r'[ \t]+', skip
        yield r'=', a.Operator.Assignment
        yield ATTRIBUTE, bygroup(a.Delimiter.Attribute, a.Name.Attribute,
                                 a.Delimiter.Dot, a.Name.Attribute), cls.attribute
        yield from cls.comments()
        yield from cls.values()
        yield default_target, -1

    @lexicon(consume=True)
    def assignment(cls):
        yield r'[ \t]+', skip
        yield r'=', a.Operator.Assignment
        yield from cls.comments()
        yield from cls.values()
        yield default_target, -1

    @lexicon(consume=True)
    def attribute(cls):
        yield r'\(', a.Delimiter.Bracket, cls.arguments
        yield default_target, -1

    # values
    @lexicon(consume=True)
    def arguments(cls):
        yield r'\)', a.Delimiter.Bracket, -1
        yield from cls.argument_list()

    @lexicon(consume=True)
    def function(cls):
        yield r'\)', a.Delimiter.Bracket, -1
        yield from cls.argument_list()

    @lexicon(consume=True)
    def array(cls):
        yield r'\]', a.Delimiter.Bracket, -1
        yield r'\s+', skip
        yield r',', Separator
        yield from cls.values()
        yield default_target, -1

    @lexicon
    def expression(cls):
        """A single value, used to read values from text."""
        yield r'\s+', skip
        yield from cls.values()
        yield default_action, a.Invalid

    @classmethod
    def argument_list(cls):
        yield r'\s+', skip
        yield r',', Separator
        yield r'(' + IDENTIFIER + r')[ \t]*(:)', bygroup(a.Name.Property, a.Delimiter.Colon)
        yield from cls.values()
        yield default_target, -1

    @classmethod
    def values(cls):
        yield STRING, a.String
        yield NUMBER, a.Number
        yield CONSTANT, a.Name.Constant
        yield r'(' + IDENTIFIER + r')(\()', bygroup(a.Name.Function, a.Delimiter.Bracket), cls.function
        yield r'\[', a.Delimiter.Bracket, cls.array
        yield IDENTIFIER, a.Name

    # comments and whitespace
    @classmethod
    def comments(cls):
        yield r'///[^\r\n]*', DocComment
        yield r'//[^\r\n]*', a.Comment

    @classmethod
    def layout(cls):
        yield from cls.comments()
        yield r'\r?\n', LineBreak
        yield r'[ \t\r\f]+', skip


class PrismaTransform(Transform):
    """Transform Prisma text to a :class:`~prismadom.dom.prisma.Schema`,
    keeping the origin tokens of the nodes."""

    ## helper methods and factory
    def factory(self, element_class, origin, *args, **attrs):
        """Create an Element, keeping its origin.

        The ``origin`` is an iterable of Token instances. All elements should
        be created using this method, so that it can be overridden for the case
        you don't want to remember the origin.

        """
        return element_class.with_origin(tuple(origin), *args, **attrs)

    def value(self, item):
        """Return a value node for the token or transformed item, or None
        if it is not a value."""
        if item.is_token:
            return self._value(item.action, item)
        elif item.name in ('function', 'array'):
            return item.obj

    _value = Dispatcher()

    @_value(a.String)
    def string_value(self, token):
        return self.factory(prisma.String, (token,), prisma.String.read_head(token.text))

    @_value(a.Number)
    def number_value(self, token):
        return self.factory(prisma.Number, (token,), prisma.Number.read_head(token.text))

    @_value(a.Name.Constant)
    def constant_value(self, token):
        if token.text == 'null':
            return self.factory(prisma.Identifier, (token,), token.text)
        return self.factory(prisma.Boolean, (token,), token.text == 'true')

    @_value(a.Name)
    def name_value(self, token):
        return self.factory(prisma.Identifier, (token,), token.text)

    def members(self, items, names, newlines=0):
        """Yield the nodes of the document root or a block body.

        Runs of blank lines become one Break node, and doc comments directly
        preceding a field or enumerator are attached to it. ``names`` are the
        names of the contexts that are allowed. ``newlines`` is the number of
        newlines counted before the first item; at the start of the document
        a single newline already makes a blank line.

        """
        docs = []
        for i in items:
            if i.is_token and i.action is LineBreak:
                newlines += 1
                continue
            if newlines > 1:
                yield from docs
                docs.clear()
                yield self.factory(prisma.Break, ())
            newlines = 0
            if i.is_token:
                if i.action is DocComment:
                    docs.append(self.factory(prisma.Comment, (i,), i.text))
                    continue
                yield from docs
                docs.clear()
                if i.action is a.Comment:
                    yield self.factory(prisma.Comment, (i,), i.text)
                else:
                    raise ParseError("unexpected {!r}".format(i.text), i)
            elif i.name == 'attribute' and 'attribute' in names:
                marker, node = i.obj
                if node.kind != 'object':
                    raise ParseError("field attribute outside a field, use '@@'", marker)
                yield from docs
                docs.clear()
                yield node
            elif i.name in names:
                node = i.obj
                if docs and isinstance(node, (prisma.Field, prisma.Enumerator)):
                    node.docs = [d.head for d in docs]
                    docs.clear()
                yield from docs
                docs.clear()
                yield node
            else:
                raise RuntimeError("unexpected context: {}".format(i.name))
        yield from docs
        if newlines > 1:
            yield self.factory(prisma.Break, ())

    def block(self, items):
        """Return the lines inside the braces of a block body."""
        if not (items[-1].is_token and items[-1] == '}'):
            raise ParseError("expected '}' to close the block", items[0])
        return items[1:-1]

    def declaration(self, element_class, items):
        """Create a declaration block."""
        keyword, *rest = items
        if not rest or rest[-1].is_token:
            raise ParseError("expected '{'", rest[-1] if rest else keyword)
        names = rest[:-1]
        shape = [t.action for t in names]
        if shape == [a.Name.Class]:
            group, name = None, names[0].text
        elif shape == [a.Name.Class, a.Delimiter.Dot, a.Name.Class]:
            group, name = names[0].text, names[2].text
        else:
            raise ParseError("expected a name after {!r}".format(keyword.text),
                names[0] if names else keyword)
        return self.factory(element_class, (keyword, *names), name, *rest[-1].obj, group=group)

    def sequence(self, opening, items, closing):
        """Return the list of value nodes (and key-value nodes) between the
        ``opening`` token and the ``closing`` delimiter.

        Checks the separating commas and the closing delimiter.

        """
        if not items or not (items[-1].is_token and items[-1] == closing):
            raise ParseError("expected {!r}".format(closing), opening)
        nodes = []
        expect_value = True
        source = iter(items[:-1])
        for i in source:
            if i.is_token and i.action is Separator:
                if expect_value:
                    raise ParseError("expected a value before ','", i)
                expect_value = True
                continue
            if not expect_value:
                raise ParseError("expected ',' or {!r}".format(closing), i if i.is_token else opening)
            if i.is_token and i.action is a.Name.Property:
                colon = next(source)
                value = next(source, None)
                value = None if value is None else self.value(value)
                if value is None:
                    raise ParseError("expected a value after ':'", colon)
                node = self.factory(prisma.KeyValue, (i,), i.text, value=value)
            else:
                node = self.value(i)
                if node is None:
                    raise ParseError("expected a value", i if i.is_token else opening)
            nodes.append(node)
            expect_value = False
        if expect_value and nodes:
            raise ParseError("expected a value before {!r}".format(closing), items[-1])
        return nodes

    ## transform methods
    def root(self, items):
        names = ('datasource', 'generator', 'model', 'view', 'type', 'enum')
        nodes = list(self.members(items, names, 1))
        # the blank line between two declarations is implied
        blocks = [n for i, n in enumerate(nodes)
            if not (isinstance(n, prisma.Break) and 0 < i < len(nodes) - 1
                    and isinstance(nodes[i - 1], prisma.Declaration)
                    and isinstance(nodes[i + 1], prisma.Declaration))]
        return self.factory(prisma.Schema, (), *blocks)

    def datasource(self, items):
        return self.declaration(prisma.Datasource, items)

    def generator(self, items):
        return self.declaration(prisma.Generator, items)

    def model(self, items):
        return self.declaration(prisma.Model, items)

    def view(self, items):
        return self.declaration(prisma.View, items)

    def type(self, items):
        return self.declaration(prisma.CompositeType, items)

    def enum(self, items):
        return self.declaration(prisma.Enum, items)

    def object_body(self, items):
        return list(self.members(self.block(items), ('field', 'attribute')))

    def enum_body(self, items):
        return list(self.members(self.block(items), ('enumerator', 'attribute')))

    def config_body(self, items):
        return list(self.members(self.block(items), ('assignment',)))

    def field(self, items):
        name, *rest = items
        if not rest:
            raise ParseError("expected field type", name)
        origin = [name]
        field_type = rest[0]
        if field_type.is_token and field_type.action is a.Name:
            origin.append(field_type)
            field_type = field_type.text
        elif not field_type.is_token and field_type.name == 'function':
            field_type = field_type.obj
        else:
            raise ParseError("expected field type", field_type if field_type.is_token else name)
        suffix = None
        attributes = []
        comment = None
        for i in rest[1:]:
            if i.is_token and i.action is Suffix and suffix is None and not attributes:
                suffix = i.text
                origin.append(i)
            elif i.is_token and i.action in (a.Comment, DocComment):
                comment = i.text
            elif not i.is_token and i.name == 'attribute':
                marker, node = i.obj
                if node.kind != 'field':
                    raise ParseError("block attribute inside a field", marker)
                attributes.append(node)
            else:
                raise ParseError("expected an attribute or the end of the line",
                    i if i.is_token else name)
        return self.factory(prisma.Field, origin, name.text, *attributes,
            field_type=field_type, array=suffix == '[]', optional=suffix == '?',
            comment=comment)

    def enumerator(self, items):
        name, *rest = items
        value = None
        attributes = []
        comment = None
        source = iter(rest)
        for i in source:
            if i.is_token and i.action is a.Operator.Assignment and value is None and not attributes:
                value = next(source, None)
                value = None if value is None else self.value(value)
                if value is None:
                    raise ParseError("expected a value after '='", i)
            elif i.is_token and i.action in (a.Comment, DocComment):
                comment = i.text
            elif not i.is_token and i.name == 'attribute':
                marker, node = i.obj
                if node.kind != 'field':
                    raise ParseError("block attribute inside an enum value", marker)
                attributes.append(node)
            else:
                raise ParseError("expected an attribute or the end of the line",
                    i if i.is_token else name)
        return self.factory(prisma.Enumerator, (name,), name.text, *attributes,
            value=value, comment=comment)

    def assignment(self, items):
        key, *rest = items
        if not rest or not (rest[0].is_token and rest[0].action is a.Operator.Assignment):
            raise ParseError("expected '='", rest[0] if rest and rest[0].is_token else key)
        value = rest[1:2] and self.value(rest[1])
        if not value:
            raise ParseError("expected a value after '='", rest[0])
        comment = None
        for i in rest[2:]:
            if i.is_token and i.action in (a.Comment, DocComment) and comment is None:
                comment = i.text
            else:
                raise ParseError("expected the end of the line", i if i.is_token else key)
        return self.factory(prisma.Assignment, (key,), key.text, value=value, comment=comment)

    def attribute(self, items):
        """Return a two-tuple (marker token, Attribute)."""
        marker, *rest = items
        names = [i for i in rest if i.is_token]
        arguments = [i.obj for i in rest if not i.is_token]
        shape = [t.action for t in names]
        if shape == [a.Name.Attribute]:
            group, name = None, names[0].text
        elif shape == [a.Name.Attribute, a.Delimiter.Dot, a.Name.Attribute]:
            group, name = names[0].text, names[2].text
        else:
            raise ParseError("expected an attribute name", marker)
        if len(arguments) > 1:
            raise ParseError("unexpected '(' after the arguments", marker)
        kind = 'field' if marker == '@' else 'object'
        node = self.factory(prisma.Attribute, (marker, *names), name,
            *(arguments[0] if arguments else ()), group=group, kind=kind)
        return marker, node

    def arguments(self, items):
        return self.sequence(items[0], items[1:], ')')

    def function(self, items):
        name = items[0]
        return self.factory(prisma.Function, (name,), name.text,
            *self.sequence(items[1], items[2:], ')'))

    def array(self, items):
        return self.factory(prisma.Array, (items[0],), *self.sequence(items[0], items[1:], ']'))

    def expression(self, items):
        values = [self.value(i) for i in items]
        if len(values) != 1 or values[0] is None:
            token = next((i for i in items if i.is_token), None)
            raise ParseError("expected a single value", token)
        return values[0]


class PrismaAdHocTransform(PrismaTransform):
    """PrismaTransform that does *not* keep the origin tokens.

    This is used to create schemas and pieces of schemas that do not need to
    know their location in the text they were read from.

    """
    def factory(self, element_class, origin, *args, **attrs):
        """Create an Element *without* keeping its origin."""
        return element_class.from_origin(tuple(origin), *args, **attrs)

