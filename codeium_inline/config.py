# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
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

"""Completion provider settings."""

import logging
import os
from dataclasses import dataclass, field
from importlib import metadata
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "codeium-inline"
DEFAULT_API_URL = "https://web-backend.codeium.com"

ENV_API_KEY = "CODEIUM_API_KEY"
ENV_API_URL = "CODEIUM_API_URL"
ENV_MULTILINE_THRESHOLD = "CODEIUM_MULTILINE_THRESHOLD"


def package_version() -> str:
    """Installed version of this package, or 'unknown'."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


@dataclass
class CompletionSettings:
    """Settings for the completion provider and its transport."""

    api_key: str = ""  # Sent in metadata and the Authorization header
    api_url: str = DEFAULT_API_URL  # Language server API root
    ide_name: str = "python"  # Also prefixes the session id
    ide_version: str = "unknown"
    extension_name: str = DISTRIBUTION_NAME
    extension_version: str = field(default_factory=package_version)
    multiline_model_threshold: Optional[float] = None  # None or 0 = server default
    timeout: Optional[float] = 30.0  # Transport timeout in seconds

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "CompletionSettings":
        """Load settings from environment variables.

        Reads CODEIUM_API_KEY, CODEIUM_API_URL and
        CODEIUM_MULTILINE_THRESHOLD. Keyword arguments take precedence.

        Args:
            environ: Mapping to read instead of os.environ
            **overrides: Explicit field values

        Returns:
            CompletionSettings instance
        """
        env = os.environ if environ is None else environ
        values: dict = {}

        if env.get(ENV_API_KEY):
            values["api_key"] = env[ENV_API_KEY]
        if env.get(ENV_API_URL):
            values["api_url"] = env[ENV_API_URL]

        threshold = env.get(ENV_MULTILINE_THRESHOLD)
        if threshold:
            try:
                values["multiline_model_threshold"] = float(threshold)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_MULTILINE_THRESHOLD}: {threshold!r}")

        values.update(overrides)
        return cls(**values)
