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
Simple helper functions to easily build DOM elements reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. This is the best
when building DOM snippets using this module and inserting them in existing
documents.

If span tracking is enabled (using the ``span_tracking`` argument or the
process-wide configuration, see :mod:`prismadom.config`), the origin tokens
are preserved, and every node that was read from the text gets a
:class:`~.element.Span` describing its location in the source.

"""

import logging

import parce
import parce.action as a
from parce.transform import Transformer

from .. import config
from ..errors import LexError, ParseError
from ..lang.prisma import Prisma
from . import util


logger = logging.getLogger(__name__)

# init two transformers, accessible by 0 (False) and 1 (True) :-)
_transformer = [Transformer(), Transformer()]
_transformer[0].transform_name_template = "{}AdHocTransform"


def tree(text, root_lexicon=Prisma.root):
    """Return the parce tree of the text.

    Raises :class:`~prismadom.errors.LexError` if the text contains
    characters that can't be tokenized.

    """
    root = parce.root(root_lexicon, text)
    for t in root.tokens():
        if t.action is a.Invalid:
            line, column = util.line_column(util.line_starts(text), t.pos)
            raise LexError(t.pos, t.text, line, column)
    return root


def tokenize(text):
    r"""Return the list of parce Tokens of the text.

    Example::

        >>> from prismadom.dom import read
        >>> [t.text for t in read.tokenize('enum Role {\n  USER\n}')]
        ['enum', 'Role', '{', '\n', 'USER', '\n', '}']

    """
    return list(tree(text).tokens())


def transform(root, text, with_origin=False):
    """Transform the parce tree, completing ParseErrors with the location."""
    try:
        return _transformer[with_origin].transform_tree(root)
    except ParseError as e:
        e.locate(text)
        raise


def parse(text, span_tracking=None):
    """Return a :class:`~.prisma.Schema` from the text.

    ``span_tracking`` can be ``'none'`` or ``'full'``; if None, the value in
    the configuration is used. Raises :class:`~prismadom.errors.LexError` or
    :class:`~prismadom.errors.ParseError` when the text is not a valid schema;
    no partial tree is ever returned.

    """
    with_origin = config.span_tracking(span_tracking)
    schema = transform(tree(text), text, with_origin)
    if with_origin:
        util.add_spans(schema, text)
    logger.debug("parsed %d blocks from %d characters", len(schema), len(text))
    return schema


def value(text):
    """Return a single value node read from the text.

    Example::

        >>> from prismadom.dom import read
        >>> read.value('now()')
        <prisma.Function 'now'>
        >>> read.value('[a, "b"]').write()
        '[a, "b"]'

    """
    return transform(tree(text, Prisma.expression), text)

