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
Generic datatypes used by prismadom.

"""


class Properties:
    """A namespace for settings, like the configuration.

    Settings are read and written as attributes; reading a setting that was
    never set returns None instead of raising AttributeError, and so does
    deleting it. Example::

        >>> from prismadom.datatypes import Properties
        >>> p = Properties(sort=True)
        >>> p
        <Properties sort=True>
        >>> p.locale is None
        True
        >>> p + Properties(locale='C')
        <Properties sort=True locale='C'>

    ``'sort' in p`` tells whether a setting is actually present, and
    :func:`vars` returns them as a dictionary. Empty Properties are false.

    """
    def __init__(self, **settings):
        vars(self).update(settings)

    def __getattr__(self, name):
        # only called for settings that are not present
        return None

    def __delattr__(self, name):
        vars(self).pop(name, None)

    def __contains__(self, name):
        return name in vars(self)

    def __bool__(self):
        return bool(vars(self))

    def __eq__(self, other):
        if not isinstance(other, Properties):
            return NotImplemented
        return vars(self) == vars(other)

    def __add__(self, other):
        """Return new Properties with the settings of other added to ours."""
        return type(self)(**{**vars(self), **vars(other)})

    def __repr__(self):
        settings = " ".join("{}={!r}".format(k, v) for k, v in vars(self).items())
        return "<{}>".format(" ".join(filter(None, (type(self).__name__, settings))))

    def update(self, **settings):
        """Change the given settings and return self; None values are skipped,
        so optional keyword arguments can be passed on unchecked."""
        vars(self).update((k, v) for k, v in settings.items() if v is not None)
        return self
