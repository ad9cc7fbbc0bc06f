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
Items and databases.

Items are identified by GUIDs written as ``{XXXXXXXX-XXXX-...}`` in upper
case. An item belongs to exactly one ``Database``; the same id in two
databases denotes two versions of the same content item.

"""

import uuid
from typing import Dict, Iterable, Iterator, List, Optional

# Template of the items that define a content language
TEMPLATE_LANGUAGE: str = "{F68F13A6-3395-426A-B9A1-FA2DC60D94EB}"


def parse_id(value: str) -> str:
    """Return the canonical form of the item id ``value``.

    Raises ``TypeError`` for ``None`` and ``ValueError`` if ``value`` is
    not a GUID.

    """
    if value is None:
        raise TypeError("item id must not be None")
    try:
        return "{%s}" % str(uuid.UUID(value.strip())).upper()
    except (AttributeError, ValueError) as e:
        raise ValueError("invalid item id: %r" % value) from e


def sanitize_path(path: str) -> str:
    """Make item path absolute, lower case and remove trailing slashes."""
    parts = [part for part in path.split("/") if part]
    return "/" + "/".join(parts).lower()


class Item:
    """Read snapshot of an item in one database."""

    def __init__(self, database: "Database", item_id: str, name: str,
                 path: str, template_id: str, language: str = "",
                 parent_id: Optional[str] = None) -> None:
        self.database = database
        self.id = parse_id(item_id)
        self.name = name
        self.path = sanitize_path(path)
        self.template_id = parse_id(template_id)
        self.language = language
        self.parent_id = parse_id(parent_id) if parent_id else None

    @property
    def is_language(self) -> bool:
        return self.template_id == TEMPLATE_LANGUAGE

    def __repr__(self) -> str:
        return "<Item %s %r in %r>" % (self.id, self.path, self.database.name)


class Database:
    """Read-only set of items indexed by id and by path."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: Dict[str, Item] = {}
        self._paths: Dict[str, Item] = {}
        self._children: Dict[str, List[str]] = {}

    def add(self, item_id: str, name: str, path: str, template_id: str,
            language: str = "", parent_id: Optional[str] = None) -> Item:
        item = Item(self, item_id, name, path, template_id, language,
                    parent_id)
        if item.id in self._items:
            raise ValueError("duplicate item id %s in database %r" %
                             (item.id, self.name))
        self._items[item.id] = item
        self._paths[item.path] = item
        if item.parent_id:
            self._children.setdefault(item.parent_id, []).append(item.id)
        return item

    def get_item(self, item_id: str) -> Optional[Item]:
        return self._items.get(parse_id(item_id))

    def get_item_by_path(self, path: str) -> Optional[Item]:
        return self._paths.get(sanitize_path(path))

    def get_children(self, item_id: str) -> Iterable[Item]:
        for child_id in self._children.get(parse_id(item_id), ()):
            yield self._items[child_id]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)
