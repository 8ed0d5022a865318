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
"""InterceptionSettings — per-type policy knobs for the interception engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from methodwrap.core.config import Config, config_properties


@config_properties(prefix="methodwrap.intercept")
class InterceptionSettings(BaseModel):
    """Policy applied by every wrapper installed for an adopting type.

    Attributes:
        after_on_failure: Run the after chain when the outermost wrapped call
            raises. When false the chain is skipped on failure and only the
            depth bookkeeping is unwound.
        wrap_private: Wrap operations whose name starts with a single
            underscore.
    """

    model_config = ConfigDict(frozen=True)

    after_on_failure: bool = False
    wrap_private: bool = True

    @classmethod
    def from_config(cls, config: Config) -> InterceptionSettings:
        return config.bind(cls)
