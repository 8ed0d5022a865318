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
"""methodwrap — transparent before/after callback chains around every operation of a class.

Usage::

    from methodwrap import Intercepted

    class Ledger(Intercepted, before="open_session", after="close_session"):
        def open_session(self) -> None: ...
        def close_session(self) -> None: ...

        def add(self, a: int, b: int) -> int:
            return a + b

    Ledger().add(2, 3)   # open_session(), add body, close_session() -> 5
"""

from methodwrap.core.config import Config, config_properties
from methodwrap.intercept import (
    Intercepted,
    InterceptionSettings,
    InterceptionState,
    InterceptorMeta,
    after_each,
    before_each,
    intercepted,
    state_of,
    wrap_operation,
)
from methodwrap.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Intercepted",
    "InterceptionSettings",
    "InterceptionState",
    "InterceptorMeta",
    "after_each",
    "before_each",
    "config_properties",
    "configure_logging",
    "intercepted",
    "state_of",
    "wrap_operation",
]
