# This file is part of publishgate - publish security gate
# Copyright © 2008 Nicolas Kandel
# Copyright © 2008 Pascal Halter
# Copyright © 2008-2017 Guillaume Ayoub
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
publishgate Helpers module.

This module offers helpers to use in tests.

"""

import os
from typing import Dict, List, Set, Tuple

from publishgate import item, principal, rights, security, storage

EXAMPLES_FOLDER = os.path.join(os.path.dirname(__file__), "static")

TEMPLATE_PAGE = "{E0000000-0000-0000-0000-000000000002}"

# Items of the static test databases
SYSTEM_LANGUAGE_EN = "{A0000000-0000-0000-0000-000000000003}"
SYSTEM_LANGUAGE_DE = "{A0000000-0000-0000-0000-000000000004}"
CONTENT = "{B0000000-0000-0000-0000-000000000001}"
HOME = "{B0000000-0000-0000-0000-000000000002}"
NEWS = "{B0000000-0000-0000-0000-000000000003}"
UEBER_UNS = "{B0000000-0000-0000-0000-000000000004}"
BONJOUR = "{B0000000-0000-0000-0000-000000000005}"
PRIVATE = "{C0000000-0000-0000-0000-000000000001}"
NOTES = "{C0000000-0000-0000-0000-000000000002}"
ARCHIVE = "{D0000000-0000-0000-0000-000000000001}"
PRIVATE_OLD = "{D0000000-0000-0000-0000-000000000002}"
MISSING = "{F0000000-0000-0000-0000-000000000001}"


def get_file_path(file_name):
    return os.path.join(EXAMPLES_FOLDER, file_name)


def get_file_content(file_name):
    with open(get_file_path(file_name), encoding="utf-8") as fd:
        return fd.read()


def configuration_to_dict(configuration):
    """Convert configuration to a dict with raw values."""
    return {section: {option: configuration.get_raw(section, option)
                      for option in configuration.options(section)
                      if not option.startswith("_")}
            for section in configuration.sections()}


class GrantRights(rights.BaseRights):
    """Rights backend granting the rights listed per (user, item id).

    Records the security state of every query.

    """

    grants: Dict[Tuple[str, str], Set[rights.AccessRight]]
    states: List[security.SecurityState]

    def __init__(self) -> None:
        super().__init__(None)
        self.grants = {}
        self.states = []

    def grant(self, user: str, item_id: str,
              *rights_: rights.AccessRight) -> None:
        self.grants.setdefault((user, item.parse_id(item_id)), set()).update(
            rights_)

    def authorization(self, user: principal.User, entity: item.Item
                      ) -> Set[rights.AccessRight]:
        self.states.append(security.get_state())
        return set(self.grants.get((user.name, entity.id), ()))


class MemoryStorage(storage.BaseStorage):
    """Storage backend holding the given databases."""

    def __init__(self, *databases: item.Database) -> None:
        super().__init__(None)
        self.databases = {database.name: database for database in databases}

    def get_database(self, name: str) -> item.Database:
        try:
            return self.databases[name]
        except KeyError as e:
            raise storage.DatabaseNotFoundError(name) from e
