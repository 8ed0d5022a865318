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
"""LoggingPort — the logging contract used by methodwrap."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from methodwrap.core.config import Config

#: Parent logger of the interception engine modules.
ENGINE_LOGGER = "methodwrap.intercept"
#: Level applied to ENGINE_LOGGER unless ``methodwrap.logging.level`` names it.
DEFAULT_ENGINE_LEVEL = "WARNING"


@runtime_checkable
class LoggingPort(Protocol):
    """Port defining the logging contract for methodwrap."""

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...


def logger_levels(level_section: Mapping[str, Any]) -> dict[str, str]:
    """Per-logger levels from a ``methodwrap.logging.level`` section, ``root`` excluded."""
    levels = {ENGINE_LOGGER: DEFAULT_ENGINE_LEVEL}
    levels.update({name: str(level).upper() for name, level in level_section.items() if name != "root"})
    return levels

