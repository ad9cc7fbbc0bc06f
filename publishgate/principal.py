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

from typing import FrozenSet, Iterable, NamedTuple


class User(NamedTuple):
    """The user on whose behalf items are published."""

    name: str
    groups: FrozenSet[str] = frozenset()


def from_name(name: str, groups: Iterable[str] = ()) -> User:
    """Build the ``User`` called ``name``.

    Raises ``TypeError`` if ``name`` is ``None``.

    """
    if name is None:
        raise TypeError("user name must not be None")
    return User(name.strip(),
                frozenset(g.strip() for g in groups if g and g.strip()))
