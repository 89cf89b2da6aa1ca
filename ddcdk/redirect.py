#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Optional, Sequence

from aws_cdk import aws_lambda

from ddcdk import constants
from ddcdk.constants import RuntimeType
from ddcdk.layers import runtime_type
from ddcdk.utils import DatadogCdkUtils

logger = DatadogCdkUtils.get_logger(__name__)


def get_dd_handler(function: aws_lambda.Function, add_layers: bool) -> Optional[str]:
    lambda_runtime_type = runtime_type(function)
    if lambda_runtime_type == RuntimeType.NODE:
        return constants.JS_HANDLER_WITH_LAYERS if add_layers else constants.JS_HANDLER
    if lambda_runtime_type == RuntimeType.PYTHON:
        return constants.PYTHON_HANDLER
    return None


def redirect_handlers(
    functions: Sequence[aws_lambda.Function], add_layers: bool
) -> None:
    for function in functions:
        cfn_function = function.node.default_child
        if not isinstance(cfn_function, aws_lambda.CfnFunction):
            raise ValueError(
                f"Function {function.node.path} has no underlying AWS::Lambda::Function"
            )
        original_handler = cfn_function.handler
        if original_handler is not None:
            function.add_environment(constants.DD_HANDLER_ENV_VAR, original_handler)

        handler = get_dd_handler(function, add_layers)
        if handler is None:
            logger.debug(
                f"Unable to get Datadog handler for runtime {function.runtime.name}"
            )
            continue
        cfn_function.handler = handler
