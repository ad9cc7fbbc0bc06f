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
The publish item pipeline.

Each item is published by running a chain of processors on a fresh
``PublishItemContext``. A processor stops the chain for its item with
``PublishItemContext.abort_pipeline()``; the batch always continues with
the next item. The child action of the result decides whether the
children of the item are published when publishing deep.

Nothing is written to the target database: the last processor only
determines what publishing would do.

"""

import enum
from typing import (FrozenSet, Iterable, Iterator, List, NamedTuple, Optional,
                    Set, Tuple)

from publishgate import item, principal, storage
from publishgate.log import logger


class PublishOperation(enum.Enum):
    NONE = "none"
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    SKIPPED = "skipped"


class PublishChildAction(enum.Enum):
    ALLOW = "allow"
    SKIP = "skip"
    KEEP = "keep"


class PublishOptions(NamedTuple):
    user_name: str
    source_database: str
    target_database: str
    groups: FrozenSet[str] = frozenset()
    deep: bool = False


class PublishItemResult(NamedTuple):
    operation: PublishOperation
    child_action: PublishChildAction = PublishChildAction.ALLOW
    explanation: Optional[str] = None


class PublishHelper:
    """Resolves items in the source and the target database of a publish
    operation."""

    def __init__(self, options: PublishOptions,
                 storage_: "storage.BaseStorage") -> None:
        self.options = options
        self.source = storage_.get_database(options.source_database)
        self.target = storage_.get_database(options.target_database)

    def get_source_item(self, item_id: str) -> Optional[item.Item]:
        return self.source.get_item(item_id)

    def get_target_item(self, item_id: str) -> Optional[item.Item]:
        return self.target.get_item(item_id)

    def get_children(self, item_id: str) -> Iterator[item.Item]:
        """Children of the item in the source database."""
        return iter(self.source.get_children(item_id))


class PublishItemContext:

    def __init__(self, item_id: str, options: PublishOptions,
                 helper: PublishHelper) -> None:
        self.item_id = item.parse_id(item_id)
        self.options = options
        self.helper = helper
        self.result = PublishItemResult(PublishOperation.NONE)
        self.aborted = False

    @property
    def user(self) -> principal.User:
        return principal.from_name(self.options.user_name,
                                   self.options.groups)

    def abort_pipeline(self, operation: PublishOperation,
                       child_action: PublishChildAction,
                       explanation: Optional[str] = None) -> None:
        """Stop processing this item with the given result."""
        self.result = PublishItemResult(operation, child_action, explanation)
        self.aborted = True


class BaseProcessor:

    def process(self, context: PublishItemContext) -> None:
        """Process the item of ``context``.

        Call ``context.abort_pipeline()`` to stop processing the item.

        """
        raise NotImplementedError


class DetermineAction(BaseProcessor):
    """Set the operation publishing the item results in."""

    def process(self, context: PublishItemContext) -> None:
        source_item = context.helper.get_source_item(context.item_id)
        target_item = context.helper.get_target_item(context.item_id)
        if source_item is None:
            operation = (PublishOperation.DELETED if target_item is not None
                         else PublishOperation.NONE)
        elif target_item is None:
            operation = PublishOperation.CREATED
        else:
            operation = PublishOperation.UPDATED
        context.result = context.result._replace(operation=operation)


class Pipeline:

    def __init__(self, processors: Iterable[BaseProcessor]) -> None:
        self.processors = list(processors)

    def run(self, context: PublishItemContext) -> PublishItemResult:
        for processor in self.processors:
            processor.process(context)
            if context.aborted:
                logger.debug("Pipeline aborted for item %s by %s",
                             context.item_id, type(processor).__name__)
                break
        return context.result

    def publish(self, item_ids: Iterable[str], options: PublishOptions,
                helper: PublishHelper
                ) -> List[Tuple[str, PublishItemResult]]:
        """Run the pipeline for every item of ``item_ids``.

        With ``options.deep`` the children of each item are processed
        after it, unless its result skips them.

        """
        results = []
        seen: Set[str] = set()
        stack = [item.parse_id(i) for i in reversed(list(item_ids))]
        while stack:
            item_id = stack.pop()
            if item_id in seen:
                continue
            seen.add(item_id)
            context = PublishItemContext(item_id, options, helper)
            result = self.run(context)
            logger.debug("Item %s: %s", item_id, result.operation.value)
            results.append((item_id, result))
            if (options.deep and
                    result.child_action is not PublishChildAction.SKIP):
                children = [c.id for c in helper.get_children(item_id)]
                stack.extend(reversed(children))
        return results
