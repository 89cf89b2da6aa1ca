#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

from ddcdk.credentials import (
    CredentialOption,
    KmsEncryptedApiKey,
    NoCredentials,
    PlainApiKey,
)
from ddcdk.datadog import Datadog
from ddcdk.env import EnvironmentSettings
from ddcdk.exceptions import DatadogCdkError, DuplicateAttachment, InvalidConfiguration
from ddcdk.parameters.props import DatadogProps
from ddcdk.validator import AttachmentResult, AttachmentValidator

__all__ = [
    "AttachmentResult",
    "AttachmentValidator",
    "CredentialOption",
    "Datadog",
    "DatadogCdkError",
    "DatadogProps",
    "DuplicateAttachment",
    "EnvironmentSettings",
    "InvalidConfiguration",
    "KmsEncryptedApiKey",
    "NoCredentials",
    "PlainApiKey",
]
