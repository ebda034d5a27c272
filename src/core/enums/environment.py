"""Application environment types.

Used by Settings to switch environment-specific behavior such as the log
renderer and API docs exposure.

Environments:
- DEVELOPMENT: Local development, console logs, docs enabled
- TESTING: Automated test runs against an isolated database
- CI: Continuous integration
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON lines."""
        return self in (Environment.TESTING, Environment.CI, Environment.PRODUCTION)
