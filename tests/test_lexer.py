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
Test the tokenizer: the Prisma language definition and read.tokenize().
"""

### find prismadom
import sys
sys.path.insert(0, '.')

import parce
import parce.action as a
import pytest

from prismadom import LexError, PrismaError
from prismadom.dom import read
from prismadom.lang.prisma import Prisma


def test_main():
    tokens = read.tokenize('enum Role {\n  USER\n}')
    assert [t.text for t in tokens] == ['enum', 'Role', '{', '\n', 'USER', '\n', '}']
    assert tokens[0].action is a.Keyword
    assert tokens[1].action is a.Name.Class
    assert tokens[4].action is a.Name.Variable

    tokens = read.tokenize('model A {\n  t String @db.VarChar(200)\n}')
    assert [t.text for t in tokens] == [
        'model', 'A', '{', '\n', 't', 'String', '@', 'db', '.', 'VarChar',
        '(', '200', ')', '\n', '}']
    assert tokens[6].action is a.Delimiter.Attribute
    assert tokens[11].action is a.Number


def test_keywords_as_names():
    tokens = read.tokenize('model A {\n  model String\n  enum  Int\n}')
    assert tokens[0].action is a.Keyword
    assert tokens[4].text == 'model' and tokens[4].action is a.Name.Variable
    assert tokens[7].text == 'enum' and tokens[7].action is a.Name.Variable


def test_comments():
    tokens = read.tokenize('/// doc\n// plain\n')
    assert [t.text for t in tokens] == ['/// doc', '\n', '// plain', '\n']
    assert tokens[0].action is a.Comment.Doc
    assert tokens[2].action is a.Comment


def test_strings():
    tokens = read.tokenize('model A {\n  a String @default("x \\" y // z")\n}')
    strings = [t.text for t in tokens if t.action is a.String]
    assert strings == ['"x \\" y // z"']
    assert not any(t.action is a.Comment for t in tokens)


def test_lex_error():
    with pytest.raises(LexError) as exc:
        read.tokenize('model A {\n  id Int $\n}')
    e = exc.value
    assert e.pos == 19
    assert e.text == '$'
    assert (e.line, e.column) == (2, 10)
    assert isinstance(e, PrismaError)

    with pytest.raises(LexError) as exc:
        read.parse('hello')
    assert exc.value.pos == 0
    assert str(exc.value) == "unrecognized character 'h' at line 1, column 1"


def test_contexts():
    root = read.tree('model A {\n  id Int @id\n}')
    model = root[0]
    assert model.lexicon is Prisma.model
    assert model[0].text == 'model' and model[1].text == 'A'
    body = model[2]
    assert body.lexicon is Prisma.object_body
    assert body[0].text == '{' and body[-1].text == '}'
    field = body[2]
    assert field.lexicon is Prisma.field
    assert field[0].text == 'id' and field[1].text == 'Int'
    assert field[2].lexicon is Prisma.attribute
    assert field[2][0].text == '@'


def test_invalid_tokens():
    tokens = list(parce.root(Prisma.root, 'hello').tokens())
    assert tokens[0].action is a.Invalid
    assert tokens[0].pos == 0


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
