"""Runtime environment types.

Used by settings and the container to pick environment-specific behavior
(log rendering in particular).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test runs, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Deployed service, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
