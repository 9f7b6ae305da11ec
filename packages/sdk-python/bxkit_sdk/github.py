"""
GitHub Run Context
==================

Identity of the current workflow run, read from the environment variables
the GitHub runner sets. Used to build the default provenance `builder-id`.
"""

import os
from typing import Mapping, Optional

from bxkit_common import ConfigError
from bxkit_common.constants import Defaults, EnvVars
from pydantic import BaseModel


class GitHubContext(BaseModel):
    """
    Run identity of a workflow.

    Attributes:
        server_url: Base URL of the GitHub server
        repository: "owner/repo" slug
        run_id: Workflow run id
        run_attempt: Attempt number of the run
    """

    server_url: str = Defaults.GITHUB_SERVER_URL
    repository: str
    run_id: str
    run_attempt: str = Defaults.GITHUB_RUN_ATTEMPT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GitHubContext":
        """
        Build the context from environment variables.

        Raises:
            ConfigError: If GITHUB_REPOSITORY or GITHUB_RUN_ID is missing
        """
        env = os.environ if env is None else env
        repository = env.get(EnvVars.GITHUB_REPOSITORY, "")
        if "/" not in repository:
            raise ConfigError(
                f"{EnvVars.GITHUB_REPOSITORY} must be set in 'owner/repo' format, got '{repository}'"
            )
        run_id = env.get(EnvVars.GITHUB_RUN_ID, "")
        if not run_id:
            raise ConfigError(f"{EnvVars.GITHUB_RUN_ID} is not set")
        return cls(
            server_url=env.get(EnvVars.GITHUB_SERVER_URL) or Defaults.GITHUB_SERVER_URL,
            repository=repository,
            run_id=run_id,
            run_attempt=env.get(EnvVars.GITHUB_RUN_ATTEMPT) or Defaults.GITHUB_RUN_ATTEMPT,
        )

    @property
    def workflow_run_url(self) -> str:
        return (
            f"{self.server_url.rstrip('/')}/{self.repository}"
            f"/actions/runs/{self.run_id}/attempts/{self.run_attempt}"
        )


def workflow_run_url() -> str:
    """URL of the current workflow run attempt."""
    return GitHubContext.from_env().workflow_run_url
