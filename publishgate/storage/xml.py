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
Storage backend that reads each database from the XML file
``<filesystem_folder>/<name>.xml``:

    <database name="master">
      <item id="{...}" name="home" path="/content/home"
            template="{...}" language="en" parent="{...}"/>
    </database>

Files are parsed on first access and kept in memory afterwards.

"""

import os
import threading
from typing import Dict

import defusedxml.ElementTree as DefusedET

from publishgate import config, item, storage
from publishgate.log import logger


class Storage(storage.BaseStorage):

    _folder: str
    _databases: Dict[str, item.Database]

    def __init__(self, configuration: config.Configuration) -> None:
        super().__init__(configuration)
        self._folder = configuration.get("storage", "filesystem_folder")
        self._databases = {}
        self._lock = threading.Lock()

    def _database_path(self, name: str) -> str:
        if not name or os.sep in name or "/" in name or name.startswith("."):
            raise ValueError("Invalid database name: %r" % name)
        return os.path.join(self._folder, "%s.xml" % name)

    def get_database(self, name: str) -> item.Database:
        path = self._database_path(name)
        with self._lock:
            database = self._databases.get(name)
            if database is None:
                if not os.path.isfile(path):
                    raise storage.DatabaseNotFoundError(name)
                database = self._load(name, path)
                self._databases[name] = database
        return database

    @staticmethod
    def _load(name: str, path: str) -> item.Database:
        try:
            root = DefusedET.parse(path).getroot()
            if root.tag != "database":
                raise ValueError("root element is %r, expected 'database'" %
                                 root.tag)
            if root.get("name", name) != name:
                raise ValueError("database is called %r, expected %r" %
                                 (root.get("name"), name))
            database = item.Database(name)
            for element in root.iter("item"):
                database.add(element.attrib["id"],
                             element.get("name", ""),
                             element.attrib["path"],
                             element.attrib["template"],
                             element.get("language", ""),
                             element.get("parent"))
        except Exception as e:
            raise RuntimeError("Failed to load database file %r: %s" %
                               (path, e)) from e
        logger.debug("Loaded %d items of database %r from %r",
                     len(database), name, path)
        return database
