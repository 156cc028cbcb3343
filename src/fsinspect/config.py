"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fsinspect.errors import ConfigurationError

PROJECT_ENV_VARS = ("FIRESTORE_PROJECT", "GOOGLE_CLOUD_PROJECT")


def _get_default_project() -> str | None:
    """Pick up the project from the environment when no flag is given."""
    for name in PROJECT_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass(slots=True)
class AppConfig:
    project: str | None = None
    database: str | None = None
    color: bool = True
    debug: bool = False
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.project:
            self.project = _get_default_project()

    def require_project(self) -> str:
        if not self.project:
            raise ConfigurationError("requires project flag", operation="create client")
        return self.project
