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
publishgate checks the rights of the publishing user on every item a
content publishing pipeline is about to publish and skips the items the
user may not publish.

Use ``create_pipeline()`` to build the default publish item pipeline or
add ``publishgate.check_security.CheckSecurity`` to your own.

"""

from typing import Optional

from publishgate import config, languages, pipeline, rights, utils
from publishgate.check_security import CheckSecurity, Decision

__all__ = ["CheckSecurity", "Decision", "VERSION", "create_pipeline"]

VERSION: str = utils.package_version("publishgate")


def create_pipeline(configuration: config.Configuration,
                    rights_: Optional[rights.BaseRights] = None,
                    languages_: Optional[languages.BaseLanguages] = None
                    ) -> pipeline.Pipeline:
    """Build the publish item pipeline: security check, then the
    determination of the publish operation."""
    return pipeline.Pipeline([
        CheckSecurity(configuration, rights_, languages_),
        pipeline.DetermineAction()])
