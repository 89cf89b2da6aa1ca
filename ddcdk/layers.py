#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import List, Optional, Sequence, Union

import constructs
from aws_cdk import aws_lambda

from ddcdk import constants
from ddcdk.constants import RuntimeType
from ddcdk.utils import DatadogCdkUtils

logger = DatadogCdkUtils.get_logger(__name__)

LayerVersionNumber = Union[int, str]


def runtime_type(function: aws_lambda.Function) -> RuntimeType:
    return constants.RUNTIME_LOOKUP.get(function.runtime.name, RuntimeType.UNSUPPORTED)


def _partition_and_account(region: str) -> tuple[str, str]:
    if region in constants.GOV_CLOUD_REGIONS:
        return "aws-us-gov", constants.DD_GOV_ACCOUNT_ID
    return "aws", constants.DD_ACCOUNT_ID


def _layer_arn(region: str, layer_name: str, version: LayerVersionNumber) -> str:
    partition, account = _partition_and_account(region)
    return f"arn:{partition}:lambda:{region}:{account}:layer:{layer_name}:{version}"


def get_lambda_layer_arn(
    region: str, version: LayerVersionNumber, runtime: str
) -> str:
    layer_name = constants.RUNTIME_TO_LAYER_NAME.get(runtime)
    if layer_name is None:
        raise ValueError(f"No Datadog Lambda Library layer for runtime {runtime}")
    return _layer_arn(region, layer_name, version)


def get_extension_layer_arn(region: str, version: LayerVersionNumber) -> str:
    return _layer_arn(region, constants.EXTENSION_LAYER_NAME, version)


def get_missing_layer_version_error_msg(
    function_key: str, formal_runtime: str, param_runtime: str
) -> str:
    return (
        f"Resource {function_key} has a {formal_runtime} runtime, but no {formal_runtime} "
        f"Lambda Library version was provided. Please add the '{param_runtime}LayerVersion' "
        "parameter for the Datadog serverless macro."
    )


def _layer_id(layer_arn: str) -> str:
    return f"DatadogLayer{DatadogCdkUtils.sha256(layer_arn)[:16]}"


def get_or_import_layer(
    scope: constructs.Construct, layer_arn: str
) -> aws_lambda.ILayerVersion:
    """
    Import a layer ARN into the scope once, and hand back the existing
    construct for any later function that needs the same layer.
    """
    layer_id = _layer_id(layer_arn)
    existing = scope.node.try_find_child(layer_id)
    if existing is not None:
        return existing  # type: ignore
    return aws_lambda.LayerVersion.from_layer_version_arn(scope, layer_id, layer_arn)


def apply_layers(
    scope: constructs.Construct,
    region: str,
    functions: Sequence[aws_lambda.Function],
    python_layer_version: Optional[LayerVersionNumber] = None,
    node_layer_version: Optional[LayerVersionNumber] = None,
    extension_layer_version: Optional[LayerVersionNumber] = None,
) -> List[str]:
    errors: List[str] = []
    for function in functions:
        runtime = function.runtime.name
        lambda_runtime_type = runtime_type(function)

        if lambda_runtime_type == RuntimeType.UNSUPPORTED:
            logger.debug(f"Unsupported runtime: {runtime}")
            continue

        if lambda_runtime_type == RuntimeType.PYTHON:
            version, formal_runtime, param_runtime = (
                python_layer_version,
                "Python",
                "python",
            )
        else:
            version, formal_runtime, param_runtime = (
                node_layer_version,
                "Node.js",
                "node",
            )

        if version is None:
            errors.append(
                get_missing_layer_version_error_msg(
                    function.node.id, formal_runtime, param_runtime
                )
            )
            continue

        layer_arns = [get_lambda_layer_arn(region, version, runtime)]
        if extension_layer_version is not None:
            layer_arns.append(get_extension_layer_arn(region, extension_layer_version))

        for layer_arn in layer_arns:
            logger.debug(f"Adding layer {layer_arn} to function {function.node.path}")
            function.add_layers(get_or_import_layer(scope, layer_arn))

    return errors
