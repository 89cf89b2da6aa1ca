#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import dataclasses
from dataclasses import dataclass
from typing import List, Optional, Union

from ddcdk import constants
from ddcdk.env import EnvironmentSettings
from ddcdk.parameters.base import Attributes, Base, Key
from ddcdk.utils import DatadogCdkUtils

logger = DatadogCdkUtils.get_logger(__name__)


class PropKey(Key):
    PYTHON_LAYER_VERSION = "pythonLayerVersion"
    NODE_LAYER_VERSION = "nodeLayerVersion"
    EXTENSION_LAYER_VERSION = "extensionLayerVersion"
    ADD_LAYERS = "addLayers"
    FORWARDER_ARN = "forwarderArn"
    FLUSH_METRICS_TO_LOGS = "flushMetricsToLogs"
    SITE = "site"
    API_KEY = "apiKey"
    API_KMS_KEY = "apiKmsKey"
    ENABLE_DATADOG_TRACING = "enableDatadogTracing"
    INJECT_LOG_CONTEXT = "injectLogContext"
    LOG_LEVEL = "logLevel"


@dataclass
class DatadogProps(Base):
    python_layer_version: Optional[Union[int, str]] = Base.parameter(
        Attributes(
            id=PropKey.PYTHON_LAYER_VERSION,
            description="Version of the Datadog Python Lambda Library layer to attach.",
        )
    )

    node_layer_version: Optional[Union[int, str]] = Base.parameter(
        Attributes(
            id=PropKey.NODE_LAYER_VERSION,
            description="Version of the Datadog Node.js Lambda Library layer to attach.",
        )
    )

    extension_layer_version: Optional[Union[int, str]] = Base.parameter(
        Attributes(
            id=PropKey.EXTENSION_LAYER_VERSION,
            description=(
                "Version of the Datadog Lambda Extension layer to attach. "
                "Requires apiKey or apiKmsKey."
            ),
        )
    )

    add_layers: Optional[bool] = Base.parameter(
        Attributes(
            id=PropKey.ADD_LAYERS,
            description="Whether to attach the Datadog Lambda Library layers.",
        )
    )

    forwarder_arn: Optional[str] = Base.parameter(
        Attributes(
            id=PropKey.FORWARDER_ARN,
            description="ARN of the Datadog Forwarder the function log groups are subscribed to.",
        )
    )

    flush_metrics_to_logs: Optional[bool] = Base.parameter(
        Attributes(
            id=PropKey.FLUSH_METRICS_TO_LOGS,
            description="Send custom metrics through the function logs instead of the API.",
        )
    )

    site: Optional[str] = Base.parameter(
        Attributes(
            id=PropKey.SITE,
            description="The Datadog site the data is sent to.",
            allowed_pattern=constants.SITE_REGEX,
            constraint_description=(
                "site must be a valid Datadog site, such as datadoghq.com, "
                "datadoghq.eu, us3.datadoghq.com or ddog-gov.com"
            ),
        )
    )

    api_key: Optional[str] = Base.parameter(
        Attributes(
            id=PropKey.API_KEY,
            description="Datadog API key in plain text.",
        )
    )

    api_kms_key: Optional[str] = Base.parameter(
        Attributes(
            id=PropKey.API_KMS_KEY,
            description="Datadog API key encrypted with KMS.",
        )
    )

    enable_datadog_tracing: Optional[bool] = Base.parameter(
        Attributes(
            id=PropKey.ENABLE_DATADOG_TRACING,
            description="Enable Datadog APM tracing.",
        )
    )

    inject_log_context: Optional[bool] = Base.parameter(
        Attributes(
            id=PropKey.INJECT_LOG_CONTEXT,
            description="Inject trace ids into the function logs.",
        )
    )

    log_level: Optional[str] = Base.parameter(
        Attributes(
            id=PropKey.LOG_LEVEL,
            description="Log level of the Datadog Lambda Library.",
        )
    )

    def with_defaults(self) -> "DatadogProps":
        defaults = {
            "add_layers": constants.DEFAULT_ADD_LAYERS,
            "site": constants.DEFAULT_SITE,
            "flush_metrics_to_logs": constants.DEFAULT_FLUSH_METRICS_TO_LOGS,
            "log_level": constants.DEFAULT_LOG_LEVEL,
            "enable_datadog_tracing": constants.DEFAULT_ENABLE_DD_TRACING,
            "inject_log_context": constants.DEFAULT_INJECT_LOG_CONTEXT,
        }
        changes = {}
        for name, default in defaults.items():
            if getattr(self, name) is None:
                logger.debug(f"No value provided for {name}, defaulting to {default}")
                changes[name] = default
        return dataclasses.replace(self, **changes)

    def validate(self) -> List[str]:
        errors = super().validate()
        if self.forwarder_arn is not None and self.extension_layer_version is not None:
            errors.append(
                "forwarderArn and extensionLayerVersion cannot be set at the same time."
            )
        if (
            self.extension_layer_version is not None
            and self.api_key is None
            and self.api_kms_key is None
        ):
            errors.append(
                "When extensionLayerVersion is set, apiKey or apiKmsKey must also be set."
            )
        return errors

    def environment_settings(self) -> EnvironmentSettings:
        props = self.with_defaults()
        return EnvironmentSettings(
            flush_metrics_to_logs=bool(props.flush_metrics_to_logs),
            site=str(props.site),
            log_level=str(props.log_level),
            enable_datadog_tracing=bool(props.enable_datadog_tracing),
            inject_log_context=bool(props.inject_log_context),
        )
