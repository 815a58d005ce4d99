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
Test the printer.
"""

### find prismadom
import sys
sys.path.insert(0, '.')

import locale

import pytest

from prismadom.dom import prisma, read
from prismadom.dom.printer import Printer, print_schema, collapse_blank_lines, locale_names


CANONICAL = '''\
// A schema

datasource db {
  provider = "postgresql"
  url      = env("DATABASE_URL")
}

generator client {
  provider        = "prisma-client-js"
  previewFeatures = ["fullTextSearch"]
}

/// A user of the application
model User {
  id        Int      @id @default(autoincrement())
  /// the email address
  email     String   @unique
  name      String? // display name
  posts     Post[]
  role      Role     @default(USER)
  createdAt DateTime @default(now())

  @@map("users")
}

model Post {
  id       Int    @id @default(autoincrement())
  title    String @db.VarChar(200)
  author   User   @relation(fields: [authorId], references: [id])
  authorId Int

  // indexes
  @@index([title, authorId], map: "post_title")
}

enum Role {
  USER
  ADMIN @map("admin") // administrator

  @@map("roles")
}
'''


def pr(text, **options):
    """Parse and print the text."""
    return print_schema(read.parse(text), newline='\n', **options)


def test_main():
    assert pr(CANONICAL) == CANONICAL
    schema = read.parse(CANONICAL)
    assert read.parse(print_schema(schema, newline='\n')).equals(schema)


def test_alignment():
    assert pr('model A {\n  a String\n  bbbbb String\n}') == \
        'model A {\n  a     String\n  bbbbb String\n}\n'

    # a comment ends the run, a doc comment does not
    assert pr('model A {\n  a Int\n  // note\n  bbb String\n}') == \
        'model A {\n  a Int\n  // note\n  bbb String\n}\n'
    assert pr('model A {\n  a Int\n  /// note\n  bbb String\n}') == \
        'model A {\n  a   Int\n  /// note\n  bbb String\n}\n'

    assert pr('generator g {\n  provider = "x"\n  output = "../y"\n}') == \
        'generator g {\n  provider = "x"\n  output   = "../y"\n}\n'


def test_canonical_form():
    messy = 'model   A{\nbbbbb String   @unique\n  @@id([a])\n    a Int\n\n\n\n}\n'
    result = 'model A {\n  bbbbb String @unique\n  a     Int\n\n  @@id([a])\n}\n'
    assert pr(messy) == result
    assert pr(result) == result

    assert pr('model A {\n  a Int\n\n\n\n  b String\n}') == \
        'model A {\n  a Int\n\n  b String\n}\n'

    assert pr('enum E {\n  @@map("e")\n  A\n}') == \
        'enum E {\n  A\n\n  @@map("e")\n}\n'

    text = 'model   A{\n  a  Int @id\n    bbbbb String\n}'
    assert read.parse(pr(text)).equals(read.parse(text))

    assert pr('\nmodel A {\n}\n') == '\nmodel A {\n}\n'
    assert pr('') == ''


def test_built_tree():
    schema = prisma.Schema(
        prisma.Model('User',
            prisma.Field('id', prisma.Attribute('id'), field_type='Int'),
            prisma.Field('tags', field_type='String', array=True),
        ),
        prisma.Model('X'),
    )
    assert print_schema(schema, newline='\n') == \
        'model User {\n  id   Int      @id\n  tags String[]\n}\n\nmodel X {\n}\n'
    assert print_schema(schema, newline='\r\n') == \
        'model User {\r\n  id   Int      @id\r\n  tags String[]\r\n}\r\n\r\nmodel X {\r\n}\r\n'


SORT_TEXT = '''\
// leading
model Zebra {
  id Int
}

model Apple {
  id Int
}

datasource db {
  provider = "sqlite"
}

generator client {
  provider = "prisma-client-js"
}
'''

SORTED = '''\
// leading
generator client {
  provider = "prisma-client-js"
}

datasource db {
  provider = "sqlite"
}

model Apple {
  id Int
}

model Zebra {
  id Int
}
'''


def test_sort():
    assert pr(SORT_TEXT) == SORT_TEXT
    assert pr(SORT_TEXT, sort=True) == SORTED

    # printing never modifies the tree
    schema = read.parse(SORT_TEXT)
    copy = schema.copy()
    print_schema(schema, sort=True)
    assert schema.equals(copy)

    schema = read.parse('generator g {\n  provider = "x"\n}\n'
                        'model M {\n  id Int\n}\n'
                        'enum E {\n  A\n}\n')
    printer = Printer(sort=True, sort_order=['enum'])
    assert [n.name for n in printer.sort_blocks(schema)] == ['E', 'g', 'M']


def test_collation():
    schema = prisma.Schema(prisma.Model('b'), prisma.Model('B'), prisma.Model('a'))
    printer = Printer(sort=True, locale='C')
    assert [n.name for n in printer.sort_blocks(schema)] == ['B', 'a', 'b']

    with pytest.raises(locale.Error):
        Printer(sort=True, locale='xx-NOWHERE').sort_blocks(schema)

    schema = prisma.Schema(prisma.Model('Zebra'), prisma.Model('apple'), prisma.Model('Mango'))
    assert [n.name for n in Printer(sort=True).sort_blocks(schema)] == ['apple', 'Mango', 'Zebra']


def test_locale_names():
    assert locale_names('en-US') == ['en_US', 'en_US.UTF-8']
    assert locale_names('nl_NL.UTF-8') == ['nl_NL.UTF-8']
    assert locale_names('C') == ['C']


def test_collapse_blank_lines():
    assert list(collapse_blank_lines(['a', '', '  ', '', 'b', ''])) == ['a', '', 'b', '']


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
