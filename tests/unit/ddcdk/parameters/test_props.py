#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import dataclasses
from typing import Optional

import aws_cdk
import pytest

from ddcdk import constants
from ddcdk.env import EnvironmentSettings
from ddcdk.exceptions import InvalidConfiguration
from ddcdk.parameters.base import Attributes, Base
from ddcdk.parameters.props import DatadogProps, PropKey


def test_defaults_fill_only_missing_values() -> None:
    props = DatadogProps(site="datadoghq.eu", flush_metrics_to_logs=False)

    with_defaults = props.with_defaults()

    assert with_defaults.site == "datadoghq.eu"
    assert with_defaults.flush_metrics_to_logs is False
    assert with_defaults.add_layers is constants.DEFAULT_ADD_LAYERS
    assert with_defaults.log_level == constants.DEFAULT_LOG_LEVEL
    assert with_defaults.enable_datadog_tracing is constants.DEFAULT_ENABLE_DD_TRACING
    assert with_defaults.inject_log_context is constants.DEFAULT_INJECT_LOG_CONTEXT
    # the original props are left untouched
    assert props.add_layers is None


def test_environment_settings_from_props() -> None:
    settings = DatadogProps(log_level="WARN").environment_settings()

    assert settings == EnvironmentSettings(log_level="WARN")
    assert settings.to_environment()[constants.LOG_LEVEL_ENV_VAR] == "warn"


def test_props_can_be_passed_via_context() -> None:
    props = DatadogProps(
        python_layer_version=28,
        forwarder_arn="arn:aws:lambda:us-east-1:123456789012:function:forwarder",
        flush_metrics_to_logs=False,
    )

    stack = aws_cdk.Stack()
    for key, value in props.to_context().items():
        stack.node.set_context(key, value)

    context_props = DatadogProps.from_context(stack)

    assert context_props == props


def test_to_context_skips_unset_values() -> None:
    assert DatadogProps(site="datadoghq.eu").to_context() == {
        PropKey.SITE: '"datadoghq.eu"'
    }


def test_valid_props_have_no_errors() -> None:
    assert DatadogProps(site="us3.datadoghq.com", python_layer_version=28).validate() == []
    assert DatadogProps(site="ddog-gov.com").validate() == []


def test_unknown_site_is_rejected() -> None:
    errors = DatadogProps(site="datadog.example.com").validate()

    assert len(errors) == 1
    assert "site" in errors[0]


def test_site_token_is_not_validated() -> None:
    stack = aws_cdk.Stack()
    site = aws_cdk.CfnParameter(stack, "Site").value_as_string

    assert DatadogProps(site=site).validate() == []


def test_forwarder_and_extension_are_mutually_exclusive() -> None:
    errors = DatadogProps(
        forwarder_arn="arn:aws:lambda:us-east-1:123456789012:function:forwarder",
        extension_layer_version=6,
        api_kms_key="encrypted",
    ).validate()

    assert errors == [
        "forwarderArn and extensionLayerVersion cannot be set at the same time."
    ]


def test_extension_requires_an_api_key() -> None:
    assert DatadogProps(extension_layer_version=6).validate() == [
        "When extensionLayerVersion is set, apiKey or apiKmsKey must also be set."
    ]
    assert DatadogProps(extension_layer_version=6, api_key="1234").validate() == []


def test_extended_props_keep_only_datadog_context_keys() -> None:
    @dataclasses.dataclass
    class StackProps(DatadogProps):
        stack_name: str = "service-stack"

    props = StackProps(python_layer_version=28, site="datadoghq.eu")

    assert [f.name for f, _ in StackProps._fields()] == [
        f.name for f, _ in DatadogProps._fields()
    ]
    assert props.to_context() == {
        PropKey.PYTHON_LAYER_VERSION: "28",
        PropKey.SITE: '"datadoghq.eu"',
    }


def test_every_prop_has_a_context_key() -> None:
    keys = {attributes.id for _, attributes in DatadogProps._fields()}

    assert keys == set(PropKey)


def test_pattern_error_falls_back_to_description() -> None:
    @dataclasses.dataclass
    class RegionProps(Base):
        site: Optional[str] = Base.parameter(
            Attributes(
                id=PropKey.SITE,
                description="The Datadog site the data is sent to.",
                allowed_pattern=r"datadoghq\.(com|eu)",
            )
        )

    errors = RegionProps(site="ddog-gov.com").validate()

    assert errors == [
        "site (The Datadog site the data is sent to.) does not match datadoghq\\.(com|eu)"
    ]


def test_plain_string_in_context_names_the_key() -> None:
    stack = aws_cdk.Stack()
    stack.node.set_context(PropKey.SITE, "datadoghq.eu")

    with pytest.raises(InvalidConfiguration, match="site"):
        DatadogProps.from_context(stack)


def test_context_values_are_optional() -> None:
    assert DatadogProps.from_context(aws_cdk.Stack()) == DatadogProps()
