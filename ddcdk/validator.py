#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Sequence, Set

from aws_cdk import aws_lambda

from ddcdk import env
from ddcdk.credentials import CredentialOption, resolve_credentials
from ddcdk.exceptions import DuplicateAttachment, InvalidConfiguration
from ddcdk.utils import DatadogCdkUtils

logger = DatadogCdkUtils.get_logger(__name__)


@dataclass(frozen=True)
class AttachmentResult:
    credentials: CredentialOption
    diagnostics: List[str] = field(default_factory=list)


class AttachmentValidator:
    """
    Keeps track of the functions a single Datadog construct has already
    configured and decides whether a new batch can be attached.

    A function is identified by its construct path, which is unique within
    a CDK app.
    """

    def __init__(self) -> None:
        self._attached: Set[str] = set()

    @property
    def attached(self) -> FrozenSet[str]:
        return frozenset(self._attached)

    @staticmethod
    def function_ref(function: aws_lambda.IFunction) -> str:
        return function.node.path

    def is_attached(self, function: aws_lambda.IFunction) -> bool:
        return self.function_ref(function) in self._attached

    def validate_and_record(
        self,
        functions: Sequence[aws_lambda.Function],
        api_key: Optional[str] = None,
        api_kms_key: Optional[str] = None,
        settings: Optional[env.EnvironmentSettings] = None,
    ) -> AttachmentResult:
        if not functions:
            raise InvalidConfiguration("At least one lambda function is required.")

        # nothing is recorded or mutated unless the whole batch is new
        seen: Set[str] = set()
        for function in functions:
            ref = self.function_ref(function)
            if ref in self._attached or ref in seen:
                raise DuplicateAttachment(ref)
            seen.add(ref)

        credentials, diagnostics = resolve_credentials(api_key, api_kms_key)

        self._attached.update(seen)
        logger.debug(f"Recorded {len(seen)} function(s): {sorted(seen)}")

        env.apply_env_variables(functions, settings, credentials)

        return AttachmentResult(credentials=credentials, diagnostics=diagnostics)
