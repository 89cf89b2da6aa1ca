#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Sequence

import constructs
from aws_cdk import aws_lambda
from aws_cdk import aws_logs as logs
from aws_cdk import aws_logs_destinations as logs_destinations

from ddcdk.utils import DatadogCdkUtils

logger = DatadogCdkUtils.get_logger(__name__)

SUBSCRIPTION_FILTER_NAME_MAX_LENGTH = 255


def generate_forwarder_construct_id(forwarder_arn: str) -> str:
    return "forwarder" + DatadogCdkUtils.sha256(forwarder_arn)


def generate_subscription_filter_name(
    function_unique_id: str, forwarder_arn: str
) -> str:
    value = DatadogCdkUtils.sha256(function_unique_id, forwarder_arn)
    return value[-SUBSCRIPTION_FILTER_NAME_MAX_LENGTH:]


def get_forwarder(
    scope: constructs.Construct, forwarder_arn: str
) -> aws_lambda.IFunction:
    forwarder_construct_id = generate_forwarder_construct_id(forwarder_arn)
    existing = scope.node.try_find_child(forwarder_construct_id)
    if existing is not None:
        return existing  # type: ignore
    return aws_lambda.Function.from_function_arn(
        scope, forwarder_construct_id, forwarder_arn
    )


def add_forwarder(
    scope: constructs.Construct,
    functions: Sequence[aws_lambda.Function],
    forwarder_arn: str,
) -> None:
    forwarder = get_forwarder(scope, forwarder_arn)
    destination = logs_destinations.LambdaDestination(forwarder)
    for function in functions:
        subscription_filter_name = generate_subscription_filter_name(
            function.node.addr, forwarder_arn
        )
        logger.debug(
            f"Subscribing forwarder {forwarder_arn} to the log group of {function.node.path}"
        )
        function.log_group.add_subscription_filter(
            subscription_filter_name,
            destination=destination,
            filter_pattern=logs.FilterPattern.all_events(),
        )
