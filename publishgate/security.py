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
Scoped security state.

While the state is ``disabled`` every rights query is granted. Code that
must get a real answer from the rights backend (e.g. the publish security
check, which may run inside a pipeline that disabled security for its own
reads) wraps its queries in ``enabler()``.

The state is kept in a ``ContextVar``: a change is only visible to the
current thread or task and is undone when the ``with`` block is left.

"""

import contextvars
import enum
from typing import Iterator

from publishgate import types


class SecurityState(enum.Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


_state: contextvars.ContextVar[SecurityState] = contextvars.ContextVar(
    "publishgate_security_state", default=SecurityState.ENABLED)


def get_state() -> SecurityState:
    return _state.get()


def is_disabled() -> bool:
    return _state.get() is SecurityState.DISABLED


@types.contextmanager
def _switch(state: SecurityState) -> Iterator[None]:
    token = _state.set(state)
    try:
        yield
    finally:
        _state.reset(token)


def enabler():
    """Evaluate rights for real inside the ``with`` block."""
    return _switch(SecurityState.ENABLED)


def disabler():
    """Grant every right inside the ``with`` block."""
    return _switch(SecurityState.DISABLED)
