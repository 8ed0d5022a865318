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
"""Exception hierarchy for methodwrap.

All library exceptions inherit from MethodWrapException so callers can catch
every engine failure in one place. Failures raised by wrapped operations are
never converted into these types; they propagate unchanged.

Categories:
- ConfigurationException: invalid or unbindable configuration
- InterceptionException: misuse or inconsistent state of the interception engine
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class MethodWrapException(Exception):
    """Base exception for all methodwrap errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INTERCEPT_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(MethodWrapException):
    """Configuration could not be loaded or bound."""


# =============================================================================
# Interception Exceptions
# =============================================================================


class InterceptionException(MethodWrapException):
    """Base class for errors raised by the interception engine itself."""


class CallbackResolutionException(InterceptionException):
    """A registered before/after callback name does not resolve to a callable."""


class NotInterceptedException(InterceptionException):
    """The class never opted in to method interception."""


class InterceptionStateException(InterceptionException):
    """Reentrancy bookkeeping left its valid range (e.g. depth underflow)."""
