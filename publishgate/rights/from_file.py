# This file is part of publishgate - publish security gate
# Copyright © 2012-2017 Guillaume Ayoub
# Copyright © 2017-2021 Unrud <unrud@outlook.com>
# Copyright © 2024-2024 Peter Bieringer <pb@bieringer.de>
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
Rights backend based on a regex-based file whose name is specified in the
config (section "rights", key "file").

The user name is matched against the "user" key (or one of the user's
groups against the comma separated "groups" key) and the item path is
matched against the "item" key. In the "item" regex you can use `{user}`
and get groups from the "user" regex with `{0}`, `{1}`, etc.
In consequence of the parameter substitution you have to write `{{` and `}}`
if you want to use regular curly braces in the "user" and "item" regexes.
The optional "database" key restricts the rule to matching database names.

The first matching section grants the comma separated access rights of
its "rights" key, e.g.:

    [editors]
    user: .+
    groups: editors
    item: /content(/.*)?
    rights: item:read, item:write, language:write

Section names are only used for naming the rule.

"""

import configparser
import re
from typing import Set

from publishgate import config, item, principal, rights
from publishgate.log import logger


class Rights(rights.BaseRights):

    _filename: str

    def __init__(self, configuration: config.Configuration) -> None:
        super().__init__(configuration)
        self._filename = configuration.get("rights", "file")
        self._log_rights_rule_doesnt_match_on_debug = configuration.get(
            "logging", "rights_rule_doesnt_match_on_debug")
        self._rights_config = configparser.ConfigParser()
        try:
            with open(self._filename, "r") as f:
                self._rights_config.read_file(f)
            logger.debug("Read rights file")
        except Exception as e:
            raise RuntimeError("Failed to load rights file %r: %s" %
                               (self._filename, e)) from e

    def authorization(self, user: principal.User, entity: item.Item
                      ) -> Set[rights.AccessRight]:
        user_name = user.name or ""
        # Prevent "regex injection"
        escaped_user = re.escape(user_name)
        for section in self._rights_config.sections():
            try:
                user_pattern = self._rights_config.get(
                    section, "user", fallback="")
                item_pattern = self._rights_config.get(section, "item")
                database_pattern = self._rights_config.get(
                    section, "database", fallback="")
                allowed_groups = {g.strip() for g in self._rights_config.get(
                    section, "groups", fallback="").split(",") if g.strip()}
                # Use empty format() for harmonized handling of curly braces
                user_match = (re.fullmatch(user_pattern.format(), user_name)
                              if user_pattern else None)
                group_match = bool(allowed_groups.intersection(user.groups))
                user_item_match = user_match and re.fullmatch(
                    item_pattern.format(
                        *(re.escape(s) for s in user_match.groups()),
                        user=escaped_user), entity.path)
                group_item_match = group_match and re.fullmatch(
                    item_pattern.format(user=escaped_user), entity.path)
                item_match = user_item_match or group_item_match
                database_match = (not database_pattern or re.fullmatch(
                    database_pattern.format(), entity.database.name))
                granted = rights.parse_rights(
                    self._rights_config.get(section, "rights"))
            except Exception as e:
                raise RuntimeError("Error in section %r of rights file %r: "
                                   "%s" % (section, self._filename, e)) from e
            if item_match and database_match:
                logger.debug("Rule %r:%r:%r matches %r:%r from section %r "
                             "rights %r", user_name, entity.database.name,
                             entity.path, user_pattern, item_pattern,
                             section, rights.format_rights(granted))
                return granted
            if self._log_rights_rule_doesnt_match_on_debug:
                logger.debug("Rule %r:%r:%r doesn't match %r:%r from "
                             "section %r", user_name, entity.database.name,
                             entity.path, user_pattern, item_pattern,
                             section)
        logger.debug("Rights: %r:%r:%r doesn't match any section", user_name,
                     entity.database.name, entity.path)
        return set()
