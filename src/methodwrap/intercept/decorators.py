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
"""Callback markers — @before_each and @after_each."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

BEFORE = "before"
AFTER = "after"

_PHASE_ATTR = "__methodwrap_callback__"


def _unwrap(member: Any) -> Any:
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def _make_marker(phase: str) -> Callable[[F], F]:
    """Create a decorator that tags a method as a *phase* callback.

    The tag is read when the owning class adopts interception; the method is
    then registered under its attribute name, in definition order.
    """

    def decorator(fn: F) -> F:
        setattr(_unwrap(fn), _PHASE_ATTR, phase)
        return fn

    return decorator


before_each = _make_marker(BEFORE)
after_each = _make_marker(AFTER)


def callback_phase(member: Any) -> str | None:
    """Return ``"before"``, ``"after"`` or ``None`` for an undecorated member."""
    return getattr(_unwrap(member), _PHASE_ATTR, None)
