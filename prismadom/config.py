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
The process-wide configuration.

The configuration is a :class:`~prismadom.datatypes.Properties` object that is
created the first time :func:`get_config` is called and then reused. It holds
the defaults for the reader and the printer:

``span_tracking``
    ``'none'`` (the default) or ``'full'``; whether parsed nodes get a
    :attr:`~prismadom.dom.element.Element.span`.

``sort``
    whether the printer reorders the declarations (default False).

``sort_order``
    a list of block tags ranked before the default order (default None).

``locale``
    the collation locale used when sorting names (default None: names are
    compared case-insensitively using the current ``LC_COLLATE`` setting).

``newline``
    the line separator of printed output (default None, i.e.
    :data:`os.linesep`).

Functions that accept these settings as keyword arguments use the
configured value only when the argument is None, so a caller can always
override a setting for one call without touching the shared configuration.

"""

import logging

from .datatypes import Properties


logger = logging.getLogger(__name__)

SPAN_TRACKING_MODES = ('none', 'full')

_config = None


def default_config():
    """Return a new Properties object with the default settings."""
    return Properties(
        span_tracking='none',
        sort=False,
        sort_order=None,
        locale=None,
        newline=None,
    )


def get_config():
    """Return the process-wide configuration, creating it on first use."""
    global _config
    if _config is None:
        _config = default_config()
        logger.debug("configuration loaded: %r", _config)
    return _config


def reset_config():
    """Forget the configuration; the next :func:`get_config` call creates it anew."""
    global _config
    _config = None


def span_tracking(value=None):
    """Return True if span tracking is requested.

    If ``value`` is None, the configured value is used. Raises ValueError
    for an unknown mode.

    """
    if value is None:
        value = get_config().span_tracking
    if value not in SPAN_TRACKING_MODES:
        raise ValueError("unknown span tracking mode: {!r}".format(value))
    return value == 'full'

