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
"""InterceptionState — the per-type context every wrapper consults at call time."""

from __future__ import annotations

import inspect
from collections.abc import Iterator
from typing import Any

from methodwrap.intercept.registry import CallbackRegistry
from methodwrap.intercept.settings import InterceptionSettings
from methodwrap.intercept.tracker import DepthTracker
from methodwrap.kernel.exceptions import CallbackResolutionException, NotInterceptedException

STATE_ATTR = "__methodwrap_state__"
ALIAS_PREFIX = "_unwrapped_"


class InterceptionState:
    """Registry, depth tracker, settings and alias mapping of one adopting type.

    Every adopting class owns exactly one state. Subclasses receive a state
    derived from their parent's (see :meth:`derive`): their own chains, but
    the depth tracker of the whole class family, so a call into any wrapper
    of the family counts as nested. Unrelated classes never share either.
    """

    def __init__(
        self,
        owner_name: str,
        registry: CallbackRegistry | None = None,
        settings: InterceptionSettings | None = None,
        tracker: DepthTracker | None = None,
    ) -> None:
        self.owner_name = owner_name
        self.registry = registry if registry is not None else CallbackRegistry()
        self.settings = settings if settings is not None else InterceptionSettings()
        self.tracker = tracker if tracker is not None else DepthTracker(owner_name)
        self._originals: dict[str, Any] = {}
        self._wrappers: dict[str, Any] = {}
        self.registry.exclude(STATE_ATTR)

    def __repr__(self) -> str:
        return f"InterceptionState(owner={self.owner_name!r}, wrapped={sorted(self._originals)!r})"

    # -- alias mapping ------------------------------------------------------

    @staticmethod
    def alias_name(name: str) -> str:
        return f"{ALIAS_PREFIX}{name}"

    def bind_original(self, name: str, member: Any, wrapper: Any) -> None:
        self._originals[name] = member
        self._wrappers[name] = wrapper

    def original(self, name: str) -> Any:
        """Return the unwrapped member that was defined under *name*."""
        try:
            return self._originals[name]
        except KeyError:
            raise KeyError(f"'{name}' is not a wrapped operation of {self.owner_name}") from None

    def installed_wrapper(self, name: str) -> Any:
        """Return the wrapper the hook installed under *name*, or None."""
        return self._wrappers.get(name)

    @property
    def wrapped_names(self) -> list[str]:
        return list(self._originals)

    # -- chains -------------------------------------------------------------

    def run_before(self, receiver: Any) -> None:
        for callback in self._resolve_chain(receiver, self.registry.before_chain()):
            callback()

    def run_after(self, receiver: Any) -> None:
        for callback in self._resolve_chain(receiver, self.registry.after_chain()):
            callback()

    async def run_before_async(self, receiver: Any) -> None:
        for callback in self._resolve_chain(receiver, self.registry.before_chain()):
            result = callback()
            if inspect.isawaitable(result):
                await result

    async def run_after_async(self, receiver: Any) -> None:
        for callback in self._resolve_chain(receiver, self.registry.after_chain()):
            result = callback()
            if inspect.isawaitable(result):
                await result

    def _resolve_chain(self, receiver: Any, names: list[str]) -> Iterator[Any]:
        # Lazy: a callback is looked up only after its predecessors have run.
        for name in names:
            callback = getattr(receiver, name, None)
            if callback is None or not callable(callback):
                raise CallbackResolutionException(
                    f"Callback '{name}' registered on {self.owner_name} is not a callable attribute",
                    code="INTERCEPT_CALLBACK",
                    context={"owner": self.owner_name, "callback": name},
                )
            try:
                inspect.signature(callback).bind()
            except TypeError:
                raise CallbackResolutionException(
                    f"Callback '{name}' registered on {self.owner_name} cannot be called "
                    f"without arguments on {receiver!r}",
                    code="INTERCEPT_CALLBACK",
                    context={"owner": self.owner_name, "callback": name},
                ) from None
            except ValueError:
                pass
            yield callback

    # -- inheritance --------------------------------------------------------

    def derive(self, owner_name: str, settings: InterceptionSettings | None = None) -> InterceptionState:
        """Create the state of a subclass: copied chains, shared depth tracker.

        Operations wrapped on this class stay wrappable on the subclass so
        overrides get their own wrapper.
        """
        return InterceptionState(
            owner_name,
            registry=self.registry.derive(release=self._originals),
            settings=settings if settings is not None else self.settings,
            tracker=self.tracker,
        )


def state_of(cls: type) -> InterceptionState:
    """Return the interception state attached to *cls* or one of its bases."""
    state = getattr(cls, STATE_ATTR, None)
    if not isinstance(state, InterceptionState):
        raise NotInterceptedException(
            f"{cls.__qualname__} has not opted in to method interception",
            code="INTERCEPT_NOT_ADOPTED",
            context={"class": cls.__qualname__},
        )
    return state
