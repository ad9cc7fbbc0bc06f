# This file is part of publishgate - publish security gate
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
The languages module resolves a language code (e.g. ``"en"`` or
``"de-AT"``) to the language item that defines it in a database.

Language items carry their own access rights: publishing content in a
language requires ``language:write`` on its language item.

Take a look at the class ``BaseLanguages`` if you want to implement your
own.

"""

from typing import Optional, Sequence

from publishgate import config, item, utils

INTERNAL_TYPES: Sequence[str] = ("database", "none")


def load(configuration: "config.Configuration") -> "BaseLanguages":
    """Load the languages module chosen in configuration."""
    return utils.load_plugin(INTERNAL_TYPES, "languages", "Languages",
                             BaseLanguages, configuration)


class BaseLanguages:

    def __init__(self, configuration: "config.Configuration") -> None:
        """Initialize BaseLanguages.

        ``configuration`` see ``publishgate.config`` module.
        The ``configuration`` must not change during the lifetime of
        this object, it is kept as an internal reference.

        """
        self.configuration = configuration

    def get_language_item(self, language: str, database: "item.Database"
                          ) -> Optional["item.Item"]:
        """Get the item that defines ``language`` in ``database``.

        Returns ``None`` if the language is not defined.

        """
        raise NotImplementedError
