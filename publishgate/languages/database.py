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
Languages backend that looks language items up below the item path
configured in section "languages", key "root".

"""

from typing import Optional

from publishgate import config, item, languages
from publishgate.log import logger


class Languages(languages.BaseLanguages):

    _root: str

    def __init__(self, configuration: config.Configuration) -> None:
        super().__init__(configuration)
        self._root = item.sanitize_path(configuration.get("languages", "root"))

    def get_language_item(self, language: str, database: item.Database
                          ) -> Optional[item.Item]:
        if not language:
            return None
        path = "%s/%s" % (self._root, language)
        language_item = database.get_item_by_path(path)
        if language_item is None:
            logger.debug("No language item %r in database %r", path,
                         database.name)
            return None
        if not language_item.is_language:
            logger.warning("Item %s at %r in database %r is not a language "
                           "item", language_item.id, path, database.name)
            return None
        return language_item
