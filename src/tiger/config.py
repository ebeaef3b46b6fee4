"""Shell configuration model.

Uses BaseModel (not BaseSettings); values come from the environment via from_env().
Git's own settings (core.pager, core.editor) are never mirrored here, they are
read live through RepositoryContext.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

_ENV_FIELDS = {
    "TIGER_GIT": "git",
    "TIGER_SHELL": "shell",
    "TIGER_DRAFT_FILENAME": "draft_filename",
    "TIGER_TEMPLATE_DELAY": "template_handoff_delay",
    "TIGER_LOG_LEVEL": "log_level",
}


class ShellConfig(BaseModel):
    """Runtime configuration for a tiger session."""

    model_config = ConfigDict(frozen=True)

    git: str = "git"
    shell: str = "sh"
    draft_filename: str = "COMMIT_DRAFTMSG"
    template_handoff_delay: float = Field(default=0.1, ge=0)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, **overrides: object) -> ShellConfig:
        """Build a config from TIGER_* environment variables.

        Keyword overrides that are not None take precedence over the environment.

        Raises:
            pydantic.ValidationError: If a value cannot be coerced.
        """
        values: dict[str, object] = {}
        for env_name, field in _ENV_FIELDS.items():
            raw = os.environ.get(env_name)
            if raw:
                values[field] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
