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
The exceptions raised by prismadom.

All exceptions inherit from :class:`PrismaError`, so a caller can catch
everything the library raises on purpose with one ``except`` clause.

"""


class PrismaError(Exception):
    """Base class for all prismadom errors."""


class LexError(PrismaError):
    """Raised when the text contains characters that can't be tokenized.

    ``pos`` is the offset of the first unrecognized character in the text,
    ``text`` the unrecognized text itself. ``line`` and ``column`` (both
    starting at 1) are set when the text was available.

    """
    def __init__(self, pos, text, line=None, column=None):
        self.pos = pos
        self.text = text
        self.line = line
        self.column = column
        where = "position {}".format(pos) if line is None else \
            "line {}, column {}".format(line, column)
        super().__init__("unrecognized character {!r} at {}".format(text[:1], where))


class ParseError(PrismaError):
    """Raised when the tokens do not match the grammar.

    ``token`` is the offending parce Token (or the last token seen when the
    text ended prematurely), ``message`` describes what was expected.

    """
    def __init__(self, message, token=None):
        self.message = message
        self.token = token
        self.line = None
        self.column = None
        super().__init__(message)

    @property
    def pos(self):
        """The position of the offending token in the text, or None."""
        if self.token is not None:
            return self.token.pos

    def locate(self, text):
        """Compute the :attr:`line` and :attr:`column` using the text."""
        pos = self.pos
        if pos is not None:
            self.line = text.count('\n', 0, pos) + 1
            self.column = pos - text.rfind('\n', 0, pos)

    def __str__(self):
        if self.line is not None:
            return "{} (line {}, column {})".format(self.message, self.line, self.column)
        return self.message


class BuilderContractError(PrismaError):
    """Raised when a SchemaBuilder method is called while the cursor
    is on a node that does not support the operation."""


class FinderMultiMatchError(PrismaError):
    """Raised by :func:`~prismadom.find.find_one` when more than one node
    matches."""

