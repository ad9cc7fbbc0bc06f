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
publishgate tests publishing the static test databases with rights from
a rights file.
"""

import pytest

import publishgate
from publishgate import pipeline, storage
from publishgate.tests import BaseTest
from publishgate.tests.helpers import (ARCHIVE, BONJOUR, CONTENT, HOME,
                                       MISSING, NEWS, NOTES, PRIVATE,
                                       PRIVATE_OLD, SYSTEM_LANGUAGE_DE,
                                       UEBER_UNS)


class TestPublish(BaseTest):
    """Tests publishing with the default pipeline."""

    def test_update(self) -> None:
        assert self.operation(HOME) == "updated"

    def test_create(self) -> None:
        assert self.operation(NEWS) == "created"

    def test_language_write(self) -> None:
        (_, result), = self.publish(UEBER_UNS)
        assert result.operation is pipeline.PublishOperation.SKIPPED
        assert result.child_action is pipeline.PublishChildAction.ALLOW
        assert "language write access" in result.explanation
        assert self.operation(UEBER_UNS, user="translator",
                              groups=["translators"]) == "created"

    def test_language_undefined(self) -> None:
        assert self.operation(BONJOUR) == "created"

    def test_language_item(self) -> None:
        assert self.operation(SYSTEM_LANGUAGE_DE) == "skipped"
        assert self.operation(SYSTEM_LANGUAGE_DE, user="admin") == "created"

    def test_read_only(self) -> None:
        (_, result), = self.publish(NOTES)
        assert result.operation is pipeline.PublishOperation.SKIPPED
        assert "read and write access" in result.explanation
        assert "database: master" in result.explanation

    def test_anonymous(self) -> None:
        assert self.operation(HOME, user="") == "skipped"

    def test_delete(self) -> None:
        (_, result), = self.publish(ARCHIVE)
        assert result.operation is pipeline.PublishOperation.SKIPPED
        assert "delete access" in result.explanation
        assert "database: web" in result.explanation
        assert self.operation(ARCHIVE, user="admin") == "deleted"

    def test_delete_without_target_delete_right(self) -> None:
        self.configure({"publishing": {
            "require_target_delete_right": "False"}})
        assert self.operation(ARCHIVE) == "deleted"
        assert self.operation(PRIVATE_OLD) == "deleted"

    def test_check_security_disabled(self) -> None:
        self.configure({"publishing": {"check_security": "False"}})
        assert self.operation(NOTES, user="") == "created"
        assert self.operation(ARCHIVE, user="") == "deleted"
        assert self.operation(UEBER_UNS) == "created"

    def test_missing(self) -> None:
        assert self.operation(MISSING) == "none"

    def test_batch_continues(self) -> None:
        results = self.publish(NOTES, HOME, ARCHIVE, NEWS)
        assert [(item_id, result.operation.value)
                for item_id, result in results] == [
            (NOTES, "skipped"), (HOME, "updated"),
            (ARCHIVE, "skipped"), (NEWS, "created")]

    def test_deep(self) -> None:
        results = self.publish(HOME, deep=True)
        assert [(item_id, result.operation.value)
                for item_id, result in results] == [
            (HOME, "updated"), (NEWS, "created"),
            (UEBER_UNS, "skipped"), (BONJOUR, "created")]

    def test_deep_children_of_skipped_item(self) -> None:
        results = self.publish(PRIVATE, deep=True)
        assert [(item_id, result.operation.value)
                for item_id, result in results] == [
            (PRIVATE, "skipped"), (NOTES, "skipped")]

    def test_deep_without_duplicates(self) -> None:
        results = self.publish(CONTENT, HOME, deep=True)
        item_ids = [item_id for item_id, _ in results]
        assert len(item_ids) == len(set(item_ids)) == 5

    def test_other_databases(self) -> None:
        self.configure({"publishing": {"target_database": "master"}})
        assert self.operation(NOTES, user="admin") == "updated"
        self.configure({"publishing": {"target_database": "preview"}})
        with pytest.raises(storage.DatabaseNotFoundError):
            self.publish(HOME)


class SkipChildren(pipeline.BaseProcessor):

    def process(self, context: pipeline.PublishItemContext) -> None:
        context.abort_pipeline(pipeline.PublishOperation.SKIPPED,
                               pipeline.PublishChildAction.SKIP,
                               "skipped with children")


class TestPipeline(BaseTest):
    """Tests the publish item pipeline itself."""

    def _helper(self, options: pipeline.PublishOptions
                ) -> pipeline.PublishHelper:
        return pipeline.PublishHelper(options,
                                      storage.load(self.configuration))

    def test_children_skipped(self) -> None:
        options = pipeline.PublishOptions("admin", "master", "web", deep=True)
        publish_pipeline = pipeline.Pipeline([SkipChildren()])
        results = publish_pipeline.publish(
            [HOME], options, self._helper(options))
        assert len(results) == 1
        assert results[0][1] == pipeline.PublishItemResult(
            pipeline.PublishOperation.SKIPPED,
            pipeline.PublishChildAction.SKIP, "skipped with children")

    def test_abort_stops_processors(self) -> None:
        options = pipeline.PublishOptions("admin", "master", "web")
        publish_pipeline = pipeline.Pipeline([
            SkipChildren(), pipeline.DetermineAction()])
        context = pipeline.PublishItemContext(HOME, options,
                                              self._helper(options))
        result = publish_pipeline.run(context)
        assert context.aborted
        assert result.operation is pipeline.PublishOperation.SKIPPED

    def test_item_id_normalized(self) -> None:
        options = pipeline.PublishOptions("admin", "master", "web")
        context = pipeline.PublishItemContext(
            HOME.strip("{}").lower(), options, self._helper(options))
        assert context.item_id == HOME

    def test_default_pipeline(self) -> None:
        publish_pipeline = publishgate.create_pipeline(self.configuration)
        assert [type(p) for p in publish_pipeline.processors] == [
            publishgate.CheckSecurity, pipeline.DetermineAction]
