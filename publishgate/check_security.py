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
Publish processor that checks the rights of the publishing user.

An item is only published if the user may write its language and

  - has read and write access to the source item, when publishing an
    update, or
  - has delete access to the target item, when publishing a deletion
    (only with ``[publishing] require_target_delete_right``).

Items the user may not publish are skipped; their children are still
processed. Items or language items that can't be found are not checked.

"""

from typing import NamedTuple, Optional

from publishgate import (config, item, languages, pipeline, principal, rights,
                         security, types)
from publishgate.log import logger
from publishgate.rights import AccessRight


class Decision(NamedTuple):
    allowed: bool
    explanation: Optional[str] = None


ALLOWED = Decision(True)


def _denied(reason: str, user: principal.User, item_: item.Item) -> Decision:
    return Decision(False, (
        "User does not have the required access. %s User: %s, item id: %s, "
        "database: %s." % (reason, user.name, item_.id, item_.database.name)))


class CheckSecurity(pipeline.BaseProcessor):

    def __init__(self, configuration: config.Configuration,
                 rights_: Optional[rights.BaseRights] = None,
                 languages_: Optional[languages.BaseLanguages] = None
                 ) -> None:
        self.configuration = configuration
        self._check_security = configuration.get(
            "publishing", "check_security")
        self._require_target_delete_right = configuration.get(
            "publishing", "require_target_delete_right")
        self._rights = rights_ or rights.load(configuration)
        self._languages = languages_ or languages.load(configuration)

    def process(self, context: pipeline.PublishItemContext) -> None:
        if context is None:
            raise TypeError("context must not be None")
        decision = self.evaluate(context.item_id, context.user,
                                 context.helper)
        if not decision.allowed:
            logger.warning("Skipping item %s: %s", context.item_id,
                           decision.explanation)
            context.abort_pipeline(pipeline.PublishOperation.SKIPPED,
                                   pipeline.PublishChildAction.ALLOW,
                                   decision.explanation)

    def evaluate(self, item_id: str, user: principal.User,
                 resolver: types.ItemResolver) -> Decision:
        """Decide if ``user`` may publish the item ``item_id``."""
        item_id = item.parse_id(item_id)
        if user is None:
            raise TypeError("user must not be None")
        if not self._check_security:
            return ALLOWED
        decision = self._check_language(item_id, user, resolver)
        if not decision.allowed:
            return decision
        source_item = resolver.get_source_item(item_id)
        if source_item is None:
            return self._check_deletion(item_id, user, resolver)
        return self._check_update(source_item, user)

    def _check_update(self, source_item: item.Item, user: principal.User
                      ) -> Decision:
        with security.enabler():
            allowed = (self._rights.is_allowed(
                           source_item, AccessRight.ITEM_READ, user) and
                       self._rights.is_allowed(
                           source_item, AccessRight.ITEM_WRITE, user))
        if allowed:
            return ALLOWED
        return _denied("To publish an update, a user must have read and "
                       "write access to the source item.", user, source_item)

    def _check_deletion(self, item_id: str, user: principal.User,
                        resolver: types.ItemResolver) -> Decision:
        if not self._require_target_delete_right:
            return ALLOWED
        target_item = resolver.get_target_item(item_id)
        if target_item is None:
            return ALLOWED
        with security.enabler():
            allowed = self._rights.is_allowed(
                target_item, AccessRight.ITEM_DELETE, user)
        if allowed:
            return ALLOWED
        return _denied("To publish a deletion, a user must have delete "
                       "access to the target item.", user, target_item)

    def _check_language(self, item_id: str, user: principal.User,
                        resolver: types.ItemResolver) -> Decision:
        item_ = resolver.get_source_item(item_id)
        if item_ is None:
            item_ = resolver.get_target_item(item_id)
        if item_ is None:
            logger.debug("Item %s not found, language not checked", item_id)
            return ALLOWED
        if item_.is_language:
            language_item = item_
        else:
            language_item = self._languages.get_language_item(
                item_.language, item_.database)
        if language_item is None:
            logger.debug("No language item for %r in database %r, language "
                         "of item %s not checked", item_.language,
                         item_.database.name, item_.id)
            return ALLOWED
        with security.enabler():
            allowed = self._rights.is_allowed(
                language_item, AccessRight.LANGUAGE_WRITE, user)
        if allowed:
            return ALLOWED
        return _denied("To publish an item, a user must have language write "
                       "access to the language of the item.", user, item_)
