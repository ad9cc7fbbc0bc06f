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

import logging

from publishgate import log


class TestLog:

    def teardown_method(self) -> None:
        log.logger.setLevel(logging.DEBUG)
        log.logger.removeFilter(log.REMOVE_TRACEBACK_FILTER)

    def test_set_level(self) -> None:
        log.set_level("warning", True)
        assert log.logger.level == logging.WARNING
        assert log.REMOVE_TRACEBACK_FILTER in log.logger.filters

    def test_backtrace_on_debug(self) -> None:
        log.set_level("debug", False)
        assert log.REMOVE_TRACEBACK_FILTER in log.logger.filters
        log.set_level(logging.DEBUG, True)
        assert log.logger.level == logging.DEBUG
        assert log.REMOVE_TRACEBACK_FILTER not in log.logger.filters

    def test_ident(self) -> None:
        factory = log.IdentLogRecordFactory(logging.LogRecord)
        record = factory("publishgate", logging.INFO, __file__, 1, "msg",
                         None, None)
        assert record.ident.split("/")[0] == str(record.process)
