#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Optional

import aws_cdk
import pytest
from aws_cdk import aws_lambda
from constructs import Construct

from tests.unit.ddcdk.util import FunctionFactory

FORWARDER_ARN = "arn:aws:lambda:sa-east-1:123456789012:function:datadog-forwarder"


@pytest.fixture
def forwarder_arn() -> str:
    return FORWARDER_ARN


@pytest.fixture
def region() -> str:
    return "sa-east-1"


@pytest.fixture
def app() -> aws_cdk.App:
    return aws_cdk.App()


@pytest.fixture
def stack(app: aws_cdk.App, region: str) -> aws_cdk.Stack:
    synthesizer = aws_cdk.DefaultStackSynthesizer(generate_bootstrap_version_rule=False)
    env = aws_cdk.Environment(account="123456789012", region=region)
    return aws_cdk.Stack(app, "stack", env=env, synthesizer=synthesizer)


@pytest.fixture
def make_function(stack: aws_cdk.Stack) -> FunctionFactory:
    def _make_function(
        function_id: str,
        runtime: aws_lambda.Runtime = aws_lambda.Runtime.PYTHON_3_11,
        handler: str = "hello.handler",
        scope: Optional[Construct] = None,
    ) -> aws_lambda.Function:
        return aws_lambda.Function(
            scope if scope is not None else stack,
            function_id,
            runtime=runtime,
            code=aws_lambda.Code.from_inline("test"),
            handler=handler,
        )

    return _make_function
