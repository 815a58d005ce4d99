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
Meta-information about the prismadom package.

The version is also declared in ``pyproject.toml``; keep them in sync.

"""

import collections

Version = collections.namedtuple("Version", "major minor patch")

#: name of the package
name = "prismadom"

#: the current version
version = Version(0, 1, 0)
version_suffix = None
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + (version_suffix or "")
