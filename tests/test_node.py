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
Test the node module.
"""

### find prismadom
import sys
sys.path.insert(0, '.')

import io

from prismadom.node import Node


class N1(Node):
    pass


class N2(Node):
    pass


class N3(Node):
    pass


class M1(N1):
    pass


class M3(N3):
    pass


def make_tree():
    return \
    N1(
        N2(
            N3(),
            M3(),
            N2(),
            M1(),
        ),
        N1(
            N2(),
        ),
    )


def test_main():
    tree = make_tree()
    assert next(tree//M3) is tree[0][1]
    assert len(list(tree/N2)) == 1
    assert sum(1 for _ in tree//N2) == 3
    assert list(tree ^ N2) == [tree[1]]
    assert list(tree // N3()) == [tree[0][0]]     # M3 has another type
    tree2 = tree.copy()
    assert tree.equals(tree2)
    assert tree != tree2
    tree2[0][3] = N2()
    assert not tree.equals(tree2)


def test_identity():
    a, b = N1(), N1()
    nodes = [a, b]
    assert nodes.index(b) == 1
    assert a.equals(b)
    assert N1() not in nodes
    assert len({a, b}) == 2
    assert N1()     # an empty node is still true


def test_dump():
    f = io.StringIO()
    N1(N2(N3()), M1()).dump(f, 'ascii')
    assert f.getvalue() == \
        "<N1 (2 children)>\n" \
        " |-<N2 (1 child)>\n" \
        " |  `-<N3 (0 children)>\n" \
        " `-<M1 (0 children)>\n"


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
