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
"""Wrapper construction — run the callback chains around one operation."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from methodwrap.intercept.state import STATE_ATTR, InterceptionState


def build_wrapper(member: Any, owner: type, state: InterceptionState) -> Any:
    """Return a replacement for *member* of the same descriptor kind.

    Instance methods and classmethods resolve the interception state from
    their receiver (``self`` / ``cls``), so a subclass runs its own chains
    and depth counter even for operations it inherited. Staticmethods have
    no receiver: callbacks are looked up on *owner*.
    """
    if isinstance(member, staticmethod):
        return staticmethod(_wrap_function(member.__func__, owner, state, bound=False))
    if isinstance(member, classmethod):
        return classmethod(_wrap_function(member.__func__, owner, state, bound=True))
    return _wrap_function(member, owner, state, bound=True)


def _wrap_function(fn: Callable[..., Any], owner: type, state: InterceptionState, bound: bool) -> Any:
    def locate(args: tuple) -> tuple[InterceptionState, Any]:
        if bound and args:
            receiver = args[0]
            found = getattr(receiver, STATE_ATTR, None)
            if isinstance(found, InterceptionState):
                return found, receiver
            return state, receiver
        return state, owner

    if inspect.iscoroutinefunction(fn):
        return _build_async_wrapper(fn, locate)
    return _build_sync_wrapper(fn, locate)


def _build_sync_wrapper(fn: Callable[..., Any], locate: Callable[[tuple], tuple[InterceptionState, Any]]) -> Any:
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        active, receiver = locate(args)
        tracker = active.tracker

        # 1. Before chain, outermost call only
        if tracker.is_outermost():
            active.run_before(receiver)

        tracker.enter()
        succeeded = False
        try:
            # 2. Execute the original operation
            result = fn(*args, **kwargs)
            succeeded = True
        finally:
            # 3. Unwind depth on every exit path, then the after chain
            tracker.leave()
            if tracker.is_outermost() and (succeeded or active.settings.after_on_failure):
                active.run_after(receiver)
        return result

    return wrapper


def _build_async_wrapper(fn: Callable[..., Any], locate: Callable[[tuple], tuple[InterceptionState, Any]]) -> Any:
    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        active, receiver = locate(args)
        tracker = active.tracker

        if tracker.is_outermost():
            await active.run_before_async(receiver)

        tracker.enter()
        succeeded = False
        try:
            result = await fn(*args, **kwargs)
            succeeded = True
        finally:
            tracker.leave()
            if tracker.is_outermost() and (succeeded or active.settings.after_on_failure):
                await active.run_after_async(receiver)
        return result

    return wrapper
