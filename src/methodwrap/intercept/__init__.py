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
"""Method interception: before/after callback chains around every operation of a class."""

from methodwrap.intercept.decorators import after_each, before_each, callback_phase
from methodwrap.intercept.hook import is_operation, on_operation_defined, unwrap_operation, wrap_operation
from methodwrap.intercept.meta import Intercepted, InterceptorMeta, adopt, intercepted
from methodwrap.intercept.registry import CallbackRegistry
from methodwrap.intercept.settings import InterceptionSettings
from methodwrap.intercept.state import InterceptionState, state_of
from methodwrap.intercept.tracker import DepthTracker
from methodwrap.intercept.wrapper import build_wrapper

__all__ = [
    "CallbackRegistry",
    "DepthTracker",
    "Intercepted",
    "InterceptionSettings",
    "InterceptionState",
    "InterceptorMeta",
    "adopt",
    "after_each",
    "before_each",
    "build_wrapper",
    "callback_phase",
    "intercepted",
    "is_operation",
    "on_operation_defined",
    "state_of",
    "unwrap_operation",
    "wrap_operation",
]
