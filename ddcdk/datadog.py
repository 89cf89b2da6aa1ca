#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import List, Optional, Sequence

import aws_cdk as cdk
import constructs
from aws_cdk import aws_lambda

import ddcdk_meta
from ddcdk import constants
from ddcdk.exceptions import InvalidConfiguration
from ddcdk.forwarder import add_forwarder
from ddcdk.layers import apply_layers
from ddcdk.parameters.props import DatadogProps
from ddcdk.redirect import redirect_handlers
from ddcdk.utils import DatadogCdkUtils
from ddcdk.validator import AttachmentValidator

logger = DatadogCdkUtils.get_logger(__name__)


class Datadog(constructs.Construct):
    """
    Instruments Lambda functions for Datadog: attaches the Datadog Lambda
    Library and Extension layers, redirects handlers to the Datadog wrapper,
    subscribes log groups to the Datadog Forwarder and injects the Datadog
    environment variables.

    Example:
        datadog = Datadog(stack, "Datadog", DatadogProps(python_layer_version=28))
        datadog.add_lambda_functions([function])
    """

    def __init__(
        self,
        scope: constructs.Construct,
        construct_id: str,
        props: Optional[DatadogProps] = None,
    ) -> None:
        super().__init__(scope, construct_id)
        self.scope = scope
        self.props = props if props is not None else DatadogProps()
        self.validator = AttachmentValidator()
        self.diagnostics: List[str] = []

    @property
    def construct_version_tag(self) -> str:
        return f"v{ddcdk_meta.__version__}"

    def add_lambda_functions(
        self, functions: Sequence[aws_lambda.Function]
    ) -> List[str]:
        DatadogCdkUtils.refresh_loggers()
        if len(functions) == 0:
            logger.debug("No lambda functions provided, nothing to instrument")
            return []

        props = self.props.with_defaults()
        errors = props.validate()
        if errors:
            raise InvalidConfiguration("\n".join(errors))

        result = self.validator.validate_and_record(
            functions,
            api_key=props.api_key,
            api_kms_key=props.api_kms_key,
            settings=props.environment_settings(),
        )
        diagnostics = list(result.diagnostics)

        region = cdk.Stack.of(functions[0]).region
        logger.debug(f"Using region: {region}")

        if props.add_layers:
            diagnostics.extend(
                apply_layers(
                    self.scope,
                    region,
                    functions,
                    python_layer_version=props.python_layer_version,
                    node_layer_version=props.node_layer_version,
                    extension_layer_version=props.extension_layer_version,
                )
            )

        redirect_handlers(functions, bool(props.add_layers))

        if props.forwarder_arn is not None:
            add_forwarder(self.scope, functions, props.forwarder_arn)

        for function in functions:
            cdk.Tags.of(function).add(
                constants.DD_CDK_CONSTRUCT_TAG_NAME, self.construct_version_tag
            )

        for diagnostic in diagnostics:
            logger.warning(diagnostic)
        self.diagnostics.extend(diagnostics)
        return diagnostics
