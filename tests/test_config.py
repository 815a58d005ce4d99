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
Test the configuration.
"""

### find prismadom
import sys
sys.path.insert(0, '.')

import os
import re

import pytest

import prismadom
from prismadom import config
from prismadom.datatypes import Properties
from prismadom.dom import read, printer


TEXT = 'model B {\n  id Int\n}\n\nmodel A {\n  id Int\n}\n'


def test_main():
    config.reset_config()
    c = config.get_config()
    assert c is config.get_config()
    assert c == config.default_config()
    assert c.span_tracking == 'none'
    assert c.sort is False
    assert c.nonexistent is None
    config.reset_config()
    assert config.get_config() is not c
    assert prismadom.get_config() is config.get_config()


def test_span_tracking():
    assert config.span_tracking('full') is True
    assert config.span_tracking('none') is False
    with pytest.raises(ValueError):
        config.span_tracking('partial')

    config.reset_config()
    try:
        config.get_config().span_tracking = 'full'
        assert read.parse(TEXT)[0].span is not None
        assert read.parse(TEXT, span_tracking='none')[0].span is None
    finally:
        config.reset_config()
    assert read.parse(TEXT)[0].span is None


def test_printer_defaults():
    config.reset_config()
    try:
        config.get_config().update(sort=True, newline='\n', locale=None)
        assert config.get_config().locale is None
        schema = read.parse(TEXT)
        assert printer.print_schema(schema) == 'model A {\n  id Int\n}\n\nmodel B {\n  id Int\n}\n'
        assert printer.print_schema(schema, sort=False) == TEXT
    finally:
        config.reset_config()


def test_properties():
    p = Properties(a=1)
    assert p.update(a=None, b=2) is p
    assert vars(p) == {'a': 1, 'b': 2}
    assert 'b' in p and 'c' not in p
    assert p + Properties(c=3) == Properties(a=1, b=2, c=3)
    del p.z
    assert repr(Properties(sort=True)) == '<Properties sort=True>'
    assert not Properties()


def test_version():
    assert prismadom.version_string == '0.1.0'
    assert prismadom.version >= (0, 1, 0)

    pyproject = os.path.join(os.path.dirname(__file__), '..', 'pyproject.toml')
    with open(pyproject, encoding='utf-8') as f:
        declared = re.search(r'^version\s*=\s*"([^"]+)"', f.read(), re.M).group(1)
    assert declared == prismadom.version_string


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
