# This file is part of publishgate - publish security gate
# Copyright © 2014 Jean-Marc Martins
# Copyright © 2012-2017 Guillaume Ayoub
# Copyright © 2017-2018 Unrud <unrud@outlook.com>
# Copyright © 2026 publishgate contributors
#
# This library is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with publishgate.  If not, see <http://www.gnu.org/licenses/>.

"""
The storage module that provides the databases items are published from
and to.

Take a look at the class ``BaseStorage`` if you want to implement your own.

"""

from typing import Sequence

from publishgate import config, item, utils

INTERNAL_TYPES: Sequence[str] = ("xml",)


def load(configuration: "config.Configuration") -> "BaseStorage":
    """Load the storage module chosen in configuration."""
    return utils.load_plugin(INTERNAL_TYPES, "storage", "Storage", BaseStorage,
                             configuration)


class DatabaseNotFoundError(KeyError):

    def __init__(self, name: str) -> None:
        super().__init__("Database doesn't exist: %r" % name)


class BaseStorage:

    def __init__(self, configuration: "config.Configuration") -> None:
        """Initialize BaseStorage.

        ``configuration`` see ``publishgate.config`` module.
        The ``configuration`` must not change during the lifetime of
        this object, it is kept as an internal reference.

        """
        self.configuration = configuration

    def get_database(self, name: str) -> "item.Database":
        """Get the database called ``name``.

        Raises ``DatabaseNotFoundError`` if it doesn't exist.

        """
        raise NotImplementedError
