#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from enum import Enum

# environment variables injected into every instrumented function
API_KEY_ENV_VAR = "DD_API_KEY"
API_KEY_KMS_ENV_VAR = "DD_KMS_API_KEY"
SITE_URL_ENV_VAR = "DD_SITE"
LOG_FORWARDING_ENV_VAR = "DD_FLUSH_TO_LOG"
LOG_LEVEL_ENV_VAR = "DD_LOG_LEVEL"
ENABLE_DD_TRACING_ENV_VAR = "DD_TRACE_ENABLED"
INJECT_LOG_CONTEXT_ENV_VAR = "DD_LOG_INJECTION"

DEFAULT_ADD_LAYERS = True
DEFAULT_SITE = "datadoghq.com"
DEFAULT_FLUSH_METRICS_TO_LOGS = True
DEFAULT_LOG_LEVEL = "info"
DEFAULT_ENABLE_DD_TRACING = True
DEFAULT_INJECT_LOG_CONTEXT = True

SITE_REGEX = (
    r"^(([a-z0-9]+\.)?datadoghq\.(com|eu)|ddog-gov\.com|([a-z0-9]+\.)?datad0g\.com)$"
)

MUTUALLY_EXCLUSIVE_CREDENTIALS_MESSAGE = (
    "The parameters apiKey and apiKMSKey are mutually exclusive. "
    "Please note this is only necessary if flushMetricsToLogs is set to false"
)

# layers
DD_ACCOUNT_ID = "464622532012"
DD_GOV_ACCOUNT_ID = "002406178527"
GOV_CLOUD_REGIONS = ["us-gov-east-1", "us-gov-west-1"]
EXTENSION_LAYER_NAME = "Datadog-Extension"

# handler redirection
DD_HANDLER_ENV_VAR = "DD_LAMBDA_HANDLER"
PYTHON_HANDLER = "datadog_lambda.handler.handler"
JS_HANDLER_WITH_LAYERS = "/opt/nodejs/node_modules/datadog-lambda-js/handler.handler"
JS_HANDLER = "node_modules/datadog-lambda-js/dist/handler.handler"

# tags
DD_CDK_CONSTRUCT_TAG_NAME = "dd_cdk_construct"

DEBUG_LOGS_ENV_VAR = "DD_CONSTRUCT_DEBUG_LOGS"


class RuntimeType(str, Enum):
    NODE = "node"
    PYTHON = "python"
    UNSUPPORTED = "unsupported"


RUNTIME_LOOKUP = {
    "nodejs10.x": RuntimeType.NODE,
    "nodejs12.x": RuntimeType.NODE,
    "nodejs14.x": RuntimeType.NODE,
    "nodejs16.x": RuntimeType.NODE,
    "nodejs18.x": RuntimeType.NODE,
    "nodejs20.x": RuntimeType.NODE,
    "python2.7": RuntimeType.PYTHON,
    "python3.6": RuntimeType.PYTHON,
    "python3.7": RuntimeType.PYTHON,
    "python3.8": RuntimeType.PYTHON,
    "python3.9": RuntimeType.PYTHON,
    "python3.10": RuntimeType.PYTHON,
    "python3.11": RuntimeType.PYTHON,
    "python3.12": RuntimeType.PYTHON,
}

RUNTIME_TO_LAYER_NAME = {
    "nodejs10.x": "Datadog-Node10-x",
    "nodejs12.x": "Datadog-Node12-x",
    "nodejs14.x": "Datadog-Node14-x",
    "nodejs16.x": "Datadog-Node16-x",
    "nodejs18.x": "Datadog-Node18-x",
    "nodejs20.x": "Datadog-Node20-x",
    "python2.7": "Datadog-Python27",
    "python3.6": "Datadog-Python36",
    "python3.7": "Datadog-Python37",
    "python3.8": "Datadog-Python38",
    "python3.9": "Datadog-Python39",
    "python3.10": "Datadog-Python310",
    "python3.11": "Datadog-Python311",
    "python3.12": "Datadog-Python312",
}
