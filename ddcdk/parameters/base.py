#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import abc
import json
import re
import typing
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Generator, List, Optional, Type, TypeVar

import aws_cdk
from constructs import Construct

from ddcdk.exceptions import InvalidConfiguration


class Key(str, Enum):
    """
    Enum providing a place to define the keys the construct props are known
    by in the CDK context. This is subclassed by category in the respective
    modules.
    """

    pass


@dataclass(frozen=True)
class Attributes:
    """
    Attributes describing a single prop: the context key it is read from,
    a human readable description and an optional pattern the value has to
    match once it is resolved.
    """

    id: Key
    description: Optional[str] = None
    allowed_pattern: Optional[str] = None
    constraint_description: Optional[str] = None


B = TypeVar("B", bound="Base")


@dataclass
class Base(abc.ABC):
    """
    Serves as a base that provides the ability to define props with specified
    attributes, marshal them to and from the CDK context and validate them
    against the pattern declared for each of them.

    Example:
        site: str = Base.parameter(Attributes(id=Key.SITE))

    All inheriting classes also need to decorated with dataclasses.dataclass
    """

    _attributes_key: ClassVar[str] = "ddcdk.parameters"

    def to_context(self) -> dict[str, Any]:
        """
        Create a dictionary that maps a prop's Key to its json-dumped
        value. This can be used to pass context into cdk.
        """
        result: dict[str, Any] = {}
        for f, attributes in self._fields():
            value = getattr(self, f.name)
            if value is not None:
                result[attributes.id] = json.dumps(value)
        return result

    @classmethod
    def from_context(cls: Type[B], scope: Construct) -> B:
        """
        Instantiate an object with the values set based on the scope's context.
        """
        params = {}

        for f, attributes in cls._fields():
            value = scope.node.try_get_context(attributes.id)
            if value is None or value == "":
                continue
            if isinstance(value, str):
                try:
                    value = json.loads(value)
                except json.JSONDecodeError as e:
                    raise InvalidConfiguration(
                        f"Context value for {attributes.id.value} is not valid JSON: {value!r}"
                    ) from e
            params[f.name] = value

        return cls(**params)

    def validate(self) -> List[str]:
        """
        Check every resolved string value against its allowed pattern.
        Values that are still CDK tokens are skipped.
        """
        errors: List[str] = []
        for f, attributes in self._fields():
            value = getattr(self, f.name)
            if attributes.allowed_pattern is None or not isinstance(value, str):
                continue
            if aws_cdk.Token.is_unresolved(value):
                continue
            if re.fullmatch(attributes.allowed_pattern, value) is None:
                errors.append(self._constraint_message(attributes))
        return errors

    @staticmethod
    def _constraint_message(attributes: Attributes) -> str:
        if attributes.constraint_description:
            return attributes.constraint_description
        described = (
            f"{attributes.id.value} ({attributes.description})"
            if attributes.description
            else attributes.id.value
        )
        return f"{described} does not match {attributes.allowed_pattern}"

    @classmethod
    def parameter(cls, attributes: Attributes) -> Any:
        """
        Defines an optional prop based on attributes.
        """
        return field(default=None, metadata={cls._attributes_key: attributes})

    @classmethod
    def _fields(cls) -> Generator[tuple[Any, Attributes], None, None]:
        for f in fields(cls):
            attributes = cls._get_attributes(f)
            if attributes is not None:
                yield f, attributes

    @classmethod
    def _get_attributes(cls, f: Any) -> Optional[Attributes]:
        if (
            f.metadata
            and cls._attributes_key in f.metadata
            and isinstance(f.metadata[cls._attributes_key], Attributes)
        ):
            return typing.cast(Attributes, f.metadata[cls._attributes_key])
        return None
