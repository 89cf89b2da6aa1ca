#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0


class DatadogCdkError(Exception):
    pass


class DuplicateAttachment(DatadogCdkError):
    def __init__(self, function_ref: str) -> None:
        self.function_ref = function_ref
        super().__init__(
            f"Datadog monitoring is already attached to function {function_ref}. "
            "Each function can only be added once per Datadog construct."
        )


class InvalidConfiguration(DatadogCdkError):
    pass
