# This file is part of publishgate - publish security gate
# Copyright © 2012-2017 Guillaume Ayoub
# Copyright © 2017-2023 Unrud <unrud@outlook.com>
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
Tests for publishgate.

"""

import logging
import shutil
import tempfile
from typing import Iterable, List, Optional, Tuple

import publishgate
from publishgate import config, pipeline, rights, storage, types
from publishgate.tests.helpers import get_file_path

# Enable debug output
publishgate.log.logger.setLevel(logging.DEBUG)


class BaseTest:
    """Base class for tests publishing from the static test databases."""

    colpath: str
    configuration: config.Configuration

    def setup_method(self) -> None:
        self.configuration = config.load()
        self.colpath = tempfile.mkdtemp()
        for name in ("master.xml", "web.xml"):
            shutil.copy(get_file_path(name), self.colpath)
        self.configure({
            "storage": {"filesystem_folder": self.colpath},
            "rights": {"type": "from_file",
                       "file": get_file_path("rights")}})

    def configure(self, config_: types.CONFIG) -> None:
        self.configuration.update(config_, "test", privileged=True)

    def teardown_method(self) -> None:
        shutil.rmtree(self.colpath)

    def publish(self, *item_ids: str, user: str = "editor",
                groups: Iterable[str] = (), deep: bool = False,
                rights_: Optional[rights.BaseRights] = None
                ) -> List[Tuple[str, pipeline.PublishItemResult]]:
        """Run the default pipeline and return the result of each
        processed item."""
        options = pipeline.PublishOptions(
            user_name=user,
            source_database=self.configuration.get(
                "publishing", "source_database"),
            target_database=self.configuration.get(
                "publishing", "target_database"),
            groups=frozenset(groups),
            deep=deep)
        helper = pipeline.PublishHelper(
            options, storage.load(self.configuration))
        publish_pipeline = publishgate.create_pipeline(
            self.configuration, rights_)
        return publish_pipeline.publish(item_ids, options, helper)

    def operation(self, item_id: str, **kwargs) -> str:
        """Publish a single item and return the operation."""
        (_, result), = self.publish(item_id, **kwargs)
        return result.operation.value
