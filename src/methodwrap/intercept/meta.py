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
"""Adoption — the automatic definition hook and its explicit counterpart.

Two ways for a class to opt in:

* ``class Service(Intercepted, before="open", after="close")`` — the
  :class:`InterceptorMeta` metaclass wraps every operation of the class body
  and every operation assigned to the class later.
* ``@intercepted(before="open", after="close")`` — wraps the operations
  present when the decorator runs. Later additions need
  :func:`~methodwrap.intercept.hook.wrap_operation`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from methodwrap.intercept.decorators import AFTER, BEFORE, callback_phase
from methodwrap.intercept.hook import on_operation_defined, unwrap_operation
from methodwrap.intercept.settings import InterceptionSettings
from methodwrap.intercept.state import STATE_ATTR, InterceptionState, state_of

T = TypeVar("T", bound=type)

logger = logging.getLogger(__name__)


def _names(value: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def _register(cls: type, state: InterceptionState, phase: str, name: str) -> None:
    if phase == BEFORE:
        state.registry.register_before(name)
    else:
        state.registry.register_after(name)
    logger.debug("Registered %s callback %s on %s", phase, name, state.owner_name)
    unwrap_operation(cls, name)


def adopt(
    cls: type,
    before: str | Iterable[str] = (),
    after: str | Iterable[str] = (),
    settings: InterceptionSettings | None = None,
) -> InterceptionState:
    """Attach a fresh interception state to *cls* and wrap its operations.

    Callbacks are registered first (class keywords, then ``@before_each`` /
    ``@after_each`` members in definition order) so they are excluded before
    any member is considered for wrapping.
    """
    inherited = getattr(cls, STATE_ATTR, None)
    if isinstance(inherited, InterceptionState):
        state = inherited.derive(cls.__qualname__, settings)
    else:
        state = InterceptionState(cls.__qualname__, settings=settings)
    type.__setattr__(cls, STATE_ATTR, state)

    for name in _names(before):
        _register(cls, state, BEFORE, name)
    for name in _names(after):
        _register(cls, state, AFTER, name)

    members = list(cls.__dict__.items())
    for name, member in members:
        phase = callback_phase(member)
        if phase is not None:
            _register(cls, state, phase, name)

    wrapped = [name for name, _ in members if on_operation_defined(cls, name, state)]
    logger.debug(
        "Interception enabled on %s: wrapped=%s before=%s after=%s",
        state.owner_name,
        wrapped,
        state.registry.before_chain(),
        state.registry.after_chain(),
    )
    return state


class InterceptorMeta(type):
    """Metaclass that wraps every operation defined on its classes.

    Class keywords ``before``, ``after`` (a name or an iterable of names) and
    ``settings`` configure the class. Each class created by the metaclass,
    subclasses included, gets its own :class:`InterceptionState`; a subclass
    shares the depth tracker of the class it derives from. ``_root=True``
    creates a class without state, whose subclasses each start a new family.
    """

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        before: str | Iterable[str] = (),
        after: str | Iterable[str] = (),
        settings: InterceptionSettings | None = None,
        _root: bool = False,
        **kwargs: Any,
    ) -> InterceptorMeta:
        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        if not _root:
            adopt(cls, before=before, after=after, settings=settings)
        return cls

    def __init__(
        cls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        before: str | Iterable[str] = (),
        after: str | Iterable[str] = (),
        settings: InterceptionSettings | None = None,
        _root: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, bases, namespace, **kwargs)

    def __setattr__(cls, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        state = cls.__dict__.get(STATE_ATTR)
        if not isinstance(state, InterceptionState):
            return
        phase = callback_phase(value)
        if phase is not None:
            _register(cls, state, phase, name)
            return
        on_operation_defined(cls, name, state)

    def register_before(cls, name: str) -> None:
        """Append *name* to the before chain of this class."""
        _register(cls, state_of(cls), BEFORE, name)

    def register_after(cls, name: str) -> None:
        """Append *name* to the after chain of this class."""
        _register(cls, state_of(cls), AFTER, name)


class Intercepted(metaclass=InterceptorMeta, _root=True):
    """Convenience base class: subclass it to adopt method interception."""


def intercepted(
    cls: T | None = None,
    *,
    before: str | Iterable[str] = (),
    after: str | Iterable[str] = (),
    settings: InterceptionSettings | None = None,
) -> T | Callable[[T], T]:
    """Class decorator that adopts interception without a metaclass.

    Usable bare (``@intercepted``) or with arguments
    (``@intercepted(before="open", after="close")``).
    """

    def decorator(target: T) -> T:
        adopt(target, before=before, after=after, settings=settings)
        return target

    if cls is not None:
        return decorator(cls)
    return decorator
