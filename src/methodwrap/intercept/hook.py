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
"""Interceptor hook — decides, once per member definition, whether to wrap it."""

from __future__ import annotations

import inspect
import logging
from typing import Any

from methodwrap.intercept.state import STATE_ATTR, InterceptionState, state_of
from methodwrap.intercept.wrapper import build_wrapper

logger = logging.getLogger(__name__)


def is_operation(member: Any) -> bool:
    """True for members the engine can wrap: functions, staticmethods, classmethods.

    Generator functions are excluded: their body runs lazily after the call
    returns, so the chains could not surround it.
    """
    if isinstance(member, (staticmethod, classmethod)):
        member = member.__func__
    if not inspect.isfunction(member):
        return False
    return not (inspect.isgeneratorfunction(member) or inspect.isasyncgenfunction(member))


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def on_operation_defined(owner: type, name: str, state: InterceptionState) -> bool:
    """Wrap the member *name* just defined on *owner*. Returns True if it was wrapped.

    The name and its alias are excluded before the wrapper is installed, so
    installing the wrapper (itself a definition) can never wrap twice.
    """
    if _is_dunder(name):
        return False
    if state.registry.is_excluded(name):
        logger.debug("Skipping excluded operation %s.%s", state.owner_name, name)
        return False

    member = owner.__dict__.get(name)
    if not is_operation(member):
        return False
    if name.startswith("_") and not state.settings.wrap_private:
        logger.debug("Skipping private operation %s.%s", state.owner_name, name)
        return False

    alias = state.alias_name(name)
    state.registry.exclude(name, alias)
    wrapper = build_wrapper(member, owner, state)
    state.bind_original(name, member, wrapper)
    type.__setattr__(owner, alias, member)
    type.__setattr__(owner, name, wrapper)

    logger.debug("Wrapped operation %s.%s (original kept as %s)", state.owner_name, name, alias)
    return True


def wrap_operation(cls: type, name: str) -> bool:
    """Explicitly run the hook for *name* on an adopting class.

    Classes adopted with :func:`~methodwrap.intercept.meta.intercepted`
    have no automatic definition hook; call this after adding an operation
    to them at runtime.
    """
    return on_operation_defined(cls, name, state_of(cls))


def unwrap_operation(owner: type, name: str) -> bool:
    """Make the unwrapped original visible as *owner*.*name* again.

    Used when an already-wrapped operation is registered as a callback: a
    wrapped callback would re-enter the chains it belongs to. The nearest
    definition in the MRO decides; only a wrapper installed by the hook is
    replaced.
    """
    for klass in owner.__mro__:
        if name not in klass.__dict__:
            continue
        state = klass.__dict__.get(STATE_ATTR)
        if not isinstance(state, InterceptionState) or name not in state.wrapped_names:
            return False
        if klass.__dict__[name] is not state.installed_wrapper(name):
            return False
        type.__setattr__(owner, name, state.original(name))
        logger.debug("Unwrapped %s.%s for use as a callback", state.owner_name, name)
        return True
    return False
