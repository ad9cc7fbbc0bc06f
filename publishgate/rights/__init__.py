# This file is part of publishgate - publish security gate
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
The rights module used to determine if a user holds an access right on
an item.

Access rights:

  - item:read: read the item
  - item:write: change the item
  - item:delete: delete the item
  - language:write: write content in the language defined by a language
    item

Take a look at the class ``BaseRights`` if you want to implement your own.

"""

import enum
from typing import Iterable, Sequence, Set

from publishgate import config, item, principal, security, utils

INTERNAL_TYPES: Sequence[str] = ("authenticated", "deny_all", "from_file")


class AccessRight(enum.Enum):
    ITEM_READ = "item:read"
    ITEM_WRITE = "item:write"
    ITEM_DELETE = "item:delete"
    LANGUAGE_WRITE = "language:write"


def load(configuration: "config.Configuration") -> "BaseRights":
    """Load the rights module chosen in configuration."""
    return utils.load_plugin(INTERNAL_TYPES, "rights", "Rights", BaseRights,
                             configuration)


def parse_rights(value: str) -> Set[AccessRight]:
    """Parse a comma separated list of access rights (e.g.
    ``"item:read, item:write"``)."""
    return {AccessRight(s.strip()) for s in value.split(",") if s.strip()}


def format_rights(rights: Iterable[AccessRight]) -> str:
    return ",".join(sorted(r.value for r in rights))


class BaseRights:

    def __init__(self, configuration: "config.Configuration") -> None:
        """Initialize BaseRights.

        ``configuration`` see ``publishgate.config`` module.
        The ``configuration`` must not change during the lifetime of
        this object, it is kept as an internal reference.

        """
        self.configuration = configuration

    def is_allowed(self, entity: "item.Item", right: AccessRight,
                   user: "principal.User") -> bool:
        """Check if ``user`` holds ``right`` on ``entity``.

        Every right is granted while security is disabled
        (see ``publishgate.security``).

        """
        if security.is_disabled():
            return True
        return right in self.authorization(user, entity)

    def authorization(self, user: "principal.User", entity: "item.Item"
                      ) -> Set[AccessRight]:
        """Get granted rights of ``user`` on ``entity``.

        ``user.name`` is empty for anonymous users.

        """
        raise NotImplementedError
