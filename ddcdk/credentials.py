#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ddcdk import constants


@dataclass(frozen=True)
class NoCredentials:
    pass


@dataclass(frozen=True)
class PlainApiKey:
    value: str


@dataclass(frozen=True)
class KmsEncryptedApiKey:
    value: str


CredentialOption = Union[NoCredentials, PlainApiKey, KmsEncryptedApiKey]


def resolve_credentials(
    api_key: Optional[str] = None, api_kms_key: Optional[str] = None
) -> Tuple[CredentialOption, List[str]]:
    """
    Resolve the raw api key props into exactly one credential variant.

    Supplying both keys is reported as a diagnostic rather than raised, and
    neither key is used in that case.
    """
    if api_key is not None and api_kms_key is not None:
        return NoCredentials(), [constants.MUTUALLY_EXCLUSIVE_CREDENTIALS_MESSAGE]
    if api_key is not None:
        return PlainApiKey(api_key), []
    if api_kms_key is not None:
        return KmsEncryptedApiKey(api_kms_key), []
    return NoCredentials(), []


def credential_environment(credentials: CredentialOption) -> dict[str, str]:
    if isinstance(credentials, PlainApiKey):
        return {constants.API_KEY_ENV_VAR: credentials.value}
    if isinstance(credentials, KmsEncryptedApiKey):
        return {constants.API_KEY_KMS_ENV_VAR: credentials.value}
    return {}
