"""Harness configuration loaded from environment variables.

Usage:
    from clientbench.config import HarnessConfig, MissingConfigError

    try:
        config = HarnessConfig.from_env()
    except MissingConfigError as e:
        print(e.missing)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from pydantic import BaseModel, Field

from clientbench.models.identity_models import BenchmarkIdentity
from clientbench.utils.env import get_env, missing_env, require_env

REPORT_REQUEST_TIMEOUT = 5 * 60
REPORT_RETRIES = 10


class MissingConfigError(Exception):
    """Raised when required configuration is absent or invalid."""

    def __init__(self, missing: list[str], message: str | None = None) -> None:
        self.missing = missing
        super().__init__(
            message
            or f"Required environment variables [{','.join(missing)}] missing"
        )


class HarnessConfig(BaseModel):
    """Everything the CLI needs to run and report the stock scenarios."""

    REQUIRED_VARIABLES: ClassVar[tuple[str, ...]] = (
        "ELASTICSEARCH_TARGET_URL",
        "ELASTICSEARCH_REPORT_URL",
        "DATA_SOURCE",
        "BUILD_ID",
        "TARGET_SERVICE_TYPE",
        "TARGET_SERVICE_NAME",
        "TARGET_SERVICE_VERSION",
        "TARGET_SERVICE_OS_FAMILY",
        "CLIENT_BRANCH",
        "CLIENT_COMMIT",
        "CLIENT_BENCHMARK_ENVIRONMENT",
    )

    target_url: str = Field(..., description="Cluster under measurement")
    report_url: str = Field(..., description="Cluster receiving the results")
    data_source: Path = Field(..., description="Directory with benchmark payloads")
    identity: BenchmarkIdentity
    filter: list[str] = Field(
        default_factory=list, description="Actions to run (all when empty)"
    )
    debug: bool = Field(False, description="Log transport traces")
    report_timeout: float = REPORT_REQUEST_TIMEOUT
    report_retries: int = REPORT_RETRIES

    @classmethod
    def from_env(cls) -> HarnessConfig:
        """Load configuration from the process environment.

        Raises:
            MissingConfigError: If required variables are unset or empty, or
                DATA_SOURCE does not exist.
        """
        missing = missing_env(cls.REQUIRED_VARIABLES)
        if missing:
            raise MissingConfigError(missing)

        env: dict[str, str] = {
            name: require_env(name) for name in cls.REQUIRED_VARIABLES
        }

        data_source = require_env("DATA_SOURCE", as_type=Path)
        if not data_source.exists():
            raise MissingConfigError(
                ["DATA_SOURCE"], f"Data source at [{data_source}] not found"
            )

        return cls(
            target_url=env["ELASTICSEARCH_TARGET_URL"],
            report_url=env["ELASTICSEARCH_REPORT_URL"],
            data_source=data_source,
            identity=BenchmarkIdentity(
                build_id=env["BUILD_ID"],
                environment=env["CLIENT_BENCHMARK_ENVIRONMENT"],
                category=get_env("CLIENT_BENCHMARK_CATEGORY", default=""),
                target=cls._target_descriptor(env),
                runner=cls._runner_descriptor(env),
            ),
            filter=get_env("FILTER", default=[], as_type=list),
            debug=get_env("DEBUG", default=False, as_type=bool),
        )

    @staticmethod
    def _target_descriptor(env: dict[str, str]) -> dict[str, Any]:
        return {
            "service": {
                "type": env["TARGET_SERVICE_TYPE"],
                "name": env["TARGET_SERVICE_NAME"],
                "version": env["TARGET_SERVICE_VERSION"],
                "git": {
                    "branch": get_env("TARGET_SERVICE_GIT_BRANCH"),
                    "commit": get_env("TARGET_SERVICE_GIT_COMMIT"),
                },
            },
            "os": {"family": env["TARGET_SERVICE_OS_FAMILY"]},
        }

    @staticmethod
    def _runner_descriptor(env: dict[str, str]) -> dict[str, Any]:
        return {
            "service": {
                "git": {
                    "branch": env["CLIENT_BRANCH"],
                    "commit": env["CLIENT_COMMIT"],
                }
            }
        }
