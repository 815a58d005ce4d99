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
Test the find module.
"""

### find prismadom
import sys
sys.path.insert(0, '.')

import re

import pytest

from prismadom import find_one, find_all, FinderMultiMatchError, parse
from prismadom.dom import prisma


TEXT = '''\
model User {
  id Int @id
}

model Post {
  id Int
}

datasource db {
  provider = "sqlite"
}
'''


def test_main():
    schema = parse(TEXT)
    user, post, db = schema
    assert find_one(schema, 'model', 'User') is user
    assert find_one(schema, prisma.Model, 'Post') is post
    assert find_one(schema, 'model', 'Nope') is None
    assert find_all(schema, 'model') == [user, post]
    assert find_all(schema, 'model', re.compile('^P')) == [post]
    assert len(find_all(schema, (prisma.Model, prisma.Datasource))) == 3

    with pytest.raises(FinderMultiMatchError) as exc:
        find_one(schema, 'model', re.compile('.*'))
    assert str(exc.value) == 'found multiple blocks with [type=model]'
    with pytest.raises(FinderMultiMatchError):
        find_one(schema, 'model')

    with pytest.raises(ValueError):
        find_all(schema, 'table')


def test_within():
    schema = parse(TEXT)
    user, post, db = schema
    assert find_one(schema, 'field', 'id', within=user) is user[0]
    assert find_one(schema, 'field', 'id', within=post) is post[0]
    assert find_one(schema, 'attribute', 'id', within=user[0]) is user[0][0]
    assert find_one(user, 'field', 'id') is user[0]
    assignment = find_one(schema, 'assignment', 'provider', within=db)
    assert assignment.value.head == 'sqlite'
    assert find_all(schema, 'field') == []


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
