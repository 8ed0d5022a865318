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
"""CallbackRegistry — before/after chains and the exclusion set of one type."""

from __future__ import annotations

from collections.abc import Iterable

# Names of the engine's own API. They are never wrapped, whichever class they
# end up on.
ENGINE_API_NAMES: frozenset[str] = frozenset(
    {
        "register_before",
        "register_after",
        "before_chain",
        "after_chain",
        "wrap_operation",
        "on_operation_defined",
    }
)

# Capabilities every Python class inherits from ``object``.
INTRINSIC_NAMES: frozenset[str] = frozenset(dir(object))


class CallbackRegistry:
    """Ordered before/after callback names plus the names that must never be wrapped.

    Both chains are append-only: insertion order is invocation order, and a
    name registered twice runs twice. Registering a callback also excludes it
    from wrapping so a callback can never intercept itself.

    Usage::

        registry = CallbackRegistry()
        registry.register_before("open_session")
        registry.register_after("close_session")

        registry.before_chain()   # ["open_session"]
        registry.is_excluded("open_session")   # True
    """

    def __init__(self, exclusions: Iterable[str] = ()) -> None:
        self._before: list[str] = []
        self._after: list[str] = []
        self._exclusions: set[str] = set(ENGINE_API_NAMES) | set(INTRINSIC_NAMES)
        self._exclusions.update(exclusions)

    def register_before(self, name: str) -> None:
        """Append *name* to the before chain and exclude it from wrapping."""
        self._before.append(name)
        self._exclusions.add(name)

    def register_after(self, name: str) -> None:
        """Append *name* to the after chain and exclude it from wrapping."""
        self._after.append(name)
        self._exclusions.add(name)

    def before_chain(self) -> list[str]:
        return list(self._before)

    def after_chain(self) -> list[str]:
        return list(self._after)

    @property
    def exclusions(self) -> frozenset[str]:
        return frozenset(self._exclusions)

    def is_excluded(self, name: str) -> bool:
        return name in self._exclusions

    def exclude(self, *names: str) -> None:
        self._exclusions.update(names)

    def derive(self, release: Iterable[str] = ()) -> CallbackRegistry:
        """Return an independent copy, used to seed a subclass's registry.

        Names in *release* are re-admitted for wrapping in the copy unless they
        are registered callbacks.
        """
        released = set(release) - set(self._before) - set(self._after)
        child = CallbackRegistry(self._exclusions - released)
        child._before = list(self._before)
        child._after = list(self._after)
        return child
