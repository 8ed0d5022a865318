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
"""Tests for the interceptor hook — wrap-or-skip decisions and aliasing."""

from __future__ import annotations

import logging

import pytest

from methodwrap.intercept.hook import is_operation, on_operation_defined, unwrap_operation, wrap_operation
from methodwrap.intercept.settings import InterceptionSettings
from methodwrap.intercept.state import STATE_ATTR, InterceptionState
from methodwrap.kernel.exceptions import NotInterceptedException


class TestIsOperation:
    def test_functions_and_method_descriptors(self) -> None:
        def fn() -> None: ...

        assert is_operation(fn)
        assert is_operation(lambda: None)
        assert is_operation(staticmethod(fn))
        assert is_operation(classmethod(fn))

    def test_non_operations(self) -> None:
        assert not is_operation(None)
        assert not is_operation(42)
        assert not is_operation(property(lambda self: 1))
        assert not is_operation(len)

    def test_generators_are_not_operations(self) -> None:
        def gen():
            yield 1

        async def agen():
            yield 1

        assert not is_operation(gen)
        assert not is_operation(agen)
        assert not is_operation(staticmethod(gen))


class TestOnOperationDefined:
    def test_wraps_and_keeps_alias(self) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        original = Plain.__dict__["ping"]
        state = InterceptionState("Plain")

        assert on_operation_defined(Plain, "ping", state) is True

        assert Plain.__dict__["ping"] is not original
        assert Plain.__dict__["_unwrapped_ping"] is original
        assert state.original("ping") is original
        assert Plain().ping() == "pong"
        assert Plain()._unwrapped_ping() == "pong"

    def test_name_and_alias_become_excluded(self) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        state = InterceptionState("Plain")
        on_operation_defined(Plain, "ping", state)

        assert state.registry.is_excluded("ping")
        assert state.registry.is_excluded("_unwrapped_ping")

    def test_second_trigger_is_a_no_op(self) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        state = InterceptionState("Plain")
        on_operation_defined(Plain, "ping", state)
        wrapper = Plain.__dict__["ping"]

        assert on_operation_defined(Plain, "ping", state) is False
        assert on_operation_defined(Plain, "_unwrapped_ping", state) is False
        assert Plain.__dict__["ping"] is wrapper
        assert state.wrapped_names == ["ping"]

    def test_registered_callbacks_are_never_wrapped(self) -> None:
        class Plain:
            def open(self) -> None: ...

        original = Plain.__dict__["open"]
        state = InterceptionState("Plain")
        state.registry.register_before("open")

        assert on_operation_defined(Plain, "open", state) is False
        assert Plain.__dict__["open"] is original

    def test_dunders_and_non_operations_are_skipped(self) -> None:
        class Plain:
            limit = 3

            def __call__(self) -> int:
                return 1

            @property
            def size(self) -> int:
                return 1

        state = InterceptionState("Plain")

        assert on_operation_defined(Plain, "__call__", state) is False
        assert on_operation_defined(Plain, "limit", state) is False
        assert on_operation_defined(Plain, "size", state) is False
        assert on_operation_defined(Plain, "missing", state) is False
        assert state.wrapped_names == []

    def test_generator_function_left_unwrapped(self) -> None:
        class Plain:
            def items(self):
                yield from (1, 2)

        state = InterceptionState("Plain")

        assert on_operation_defined(Plain, "items", state) is False
        assert list(Plain().items()) == [1, 2]

    def test_private_operations_follow_settings(self) -> None:
        class Plain:
            def _helper(self) -> int:
                return 1

        strict = InterceptionState("Plain", settings=InterceptionSettings(wrap_private=False))
        assert on_operation_defined(Plain, "_helper", strict) is False

        default = InterceptionState("Plain")
        assert on_operation_defined(Plain, "_helper", default) is True

    def test_logs_wrapped_operation(self, caplog: pytest.LogCaptureFixture) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        caplog.set_level(logging.DEBUG, logger="methodwrap.intercept.hook")
        on_operation_defined(Plain, "ping", InterceptionState("Plain"))

        assert "Wrapped operation Plain.ping" in caplog.text


class TestWrapOperation:
    def test_requires_an_adopting_class(self) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        with pytest.raises(NotInterceptedException):
            wrap_operation(Plain, "ping")


class TestUnwrapOperation:
    def test_restores_the_original(self) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        original = Plain.__dict__["ping"]
        state = InterceptionState("Plain")
        type.__setattr__(Plain, STATE_ATTR, state)
        on_operation_defined(Plain, "ping", state)

        assert unwrap_operation(Plain, "ping") is True
        assert Plain.__dict__["ping"] is original
        assert unwrap_operation(Plain, "ping") is False

    def test_leaves_unwrapped_members_alone(self) -> None:
        class Plain:
            def ping(self) -> str:
                return "pong"

        assert unwrap_operation(Plain, "ping") is False
        assert unwrap_operation(Plain, "missing") is False
