#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

from typing import Any, Callable, List

import aws_cdk
from aws_cdk import Stack, assertions
from aws_cdk import aws_lambda
from aws_cdk import aws_logs as logs

FunctionFactory = Callable[..., aws_lambda.Function]

# a runtime Datadog has no layer or handler for
RUBY_RUNTIME = aws_lambda.Runtime(
    "ruby3.2", aws_lambda.RuntimeFamily.RUBY, supports_inline_code=True
)


def function_logical_id(function: aws_lambda.Function) -> str:
    cfn_function = function.node.default_child
    assert isinstance(cfn_function, aws_cdk.CfnElement)
    return Stack.of(function).get_logical_id(cfn_function)


def find_datadog_subscription_filters(
    function: aws_lambda.Function,
) -> List[logs.CfnSubscriptionFilter]:
    return [
        child
        for child in function.node.find_all()
        if isinstance(child, logs.CfnSubscriptionFilter)
    ]


def assert_function_subscribed_to_forwarder(
    template: assertions.Template,
    function: aws_lambda.Function,
    forwarder_arn: str,
) -> None:
    filters = find_datadog_subscription_filters(function)
    assert len(filters) == 1
    logical_id = Stack.of(function).get_logical_id(filters[0])
    subscribed = template.find_resources(
        "AWS::Logs::SubscriptionFilter",
        {"Properties": {"DestinationArn": forwarder_arn, "FilterPattern": ""}},
    )
    assert logical_id in subscribed


def function_environment(function: aws_lambda.Function) -> Any:
    template = assertions.Template.from_stack(Stack.of(function))
    resource = template.to_json()["Resources"][function_logical_id(function)]
    return resource["Properties"].get("Environment", {}).get("Variables", {})
