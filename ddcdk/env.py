#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import Optional, Sequence

from aws_cdk import aws_lambda

from ddcdk import constants
from ddcdk.credentials import CredentialOption, credential_environment
from ddcdk.utils import DatadogCdkUtils

logger = DatadogCdkUtils.get_logger(__name__)


def _to_env_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).lower()


@dataclass(frozen=True)
class EnvironmentSettings:
    flush_metrics_to_logs: bool = constants.DEFAULT_FLUSH_METRICS_TO_LOGS
    site: str = constants.DEFAULT_SITE
    log_level: str = constants.DEFAULT_LOG_LEVEL
    enable_datadog_tracing: bool = constants.DEFAULT_ENABLE_DD_TRACING
    inject_log_context: bool = constants.DEFAULT_INJECT_LOG_CONTEXT

    def to_environment(self) -> dict[str, str]:
        return {
            constants.LOG_FORWARDING_ENV_VAR: _to_env_value(self.flush_metrics_to_logs),
            constants.SITE_URL_ENV_VAR: _to_env_value(self.site),
            constants.LOG_LEVEL_ENV_VAR: _to_env_value(self.log_level),
            constants.ENABLE_DD_TRACING_ENV_VAR: _to_env_value(
                self.enable_datadog_tracing
            ),
            constants.INJECT_LOG_CONTEXT_ENV_VAR: _to_env_value(
                self.inject_log_context
            ),
        }


def apply_env_variables(
    functions: Sequence[aws_lambda.Function],
    settings: Optional[EnvironmentSettings],
    credentials: CredentialOption,
) -> None:
    variables = settings.to_environment() if settings is not None else {}
    variables.update(credential_environment(credentials))
    if not variables:
        return
    for function in functions:
        logger.debug(
            f"Setting {', '.join(variables.keys())} on function {function.node.path}"
        )
        for key, value in variables.items():
            function.add_environment(key, value)
