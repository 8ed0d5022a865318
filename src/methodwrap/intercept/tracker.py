# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""DepthTracker — outermost-call detection for wrapped operations.

The depth counter lives in a :class:`contextvars.ContextVar`, so every thread
and every asyncio task sees its own call stack. Two callers running wrapped
operations of the same type concurrently never observe each other's depth.
"""

from __future__ import annotations

from contextvars import ContextVar

from methodwrap.kernel.exceptions import InterceptionStateException


class DepthTracker:
    """Counts wrapped operations currently on the call stack for one type."""

    def __init__(self, owner_name: str) -> None:
        self._owner_name = owner_name
        self._depth: ContextVar[int] = ContextVar(f"methodwrap_depth_{owner_name}", default=0)

    @property
    def depth(self) -> int:
        return self._depth.get()

    def is_outermost(self) -> bool:
        """True when no wrapped operation of this type is active in the current context."""
        return self._depth.get() == 0

    def enter(self) -> None:
        self._depth.set(self._depth.get() + 1)

    def leave(self) -> None:
        depth = self._depth.get()
        if depth == 0:
            raise InterceptionStateException(
                f"Depth underflow while leaving a wrapped operation of '{self._owner_name}'",
                code="INTERCEPT_DEPTH",
                context={"owner": self._owner_name},
            )
        self._depth.set(depth - 1)
