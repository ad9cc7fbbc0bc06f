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
Rights backend that grants every right to authenticated users.

"""

from typing import Set

from publishgate import item, principal, rights


class Rights(rights.BaseRights):

    def authorization(self, user: principal.User, entity: item.Item
                      ) -> Set[rights.AccessRight]:
        if not user.name:
            return set()
        return set(rights.AccessRight)
