"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
from dataclasses import dataclass
from typing import Literal, get_args

from cattrs import BaseValidationError
from cattrs.errors import ForbiddenExtraKeysError

from .selectors import (
    ConfigurationError,
    ElementSelector,
    by_name,
    by_name_and_all_attributes,
    by_name_and_attributes,
    by_name_and_attributes_control_ns,
    by_name_and_text,
    by_name_and_text_rec,
    default,
)
from .serializer import JsonType, json_to_object

LOGGER = logging.getLogger(__name__)

SelectorPolicy = Literal[
    "default",
    "by-name",
    "by-name-and-text",
    "by-name-and-attributes",
    "by-name-and-attributes-control-ns",
    "by-name-and-all-attributes",
    "by-name-and-text-rec",
]

_SIMPLE_SELECTORS: dict[str, ElementSelector] = {
    "default": default,
    "by-name": by_name,
    "by-name-and-text": by_name_and_text,
    "by-name-and-all-attributes": by_name_and_all_attributes,
    "by-name-and-text-rec": by_name_and_text_rec,
}

_ATTRIBUTE_POLICIES = ("by-name-and-attributes", "by-name-and-attributes-control-ns")


@dataclass(frozen=True)
class SelectorOptions:
    """
    Chooses an element matching policy.

    :param policy: Name of the matching policy.
    :param attributes: Attribute names compared by attribute-based policies.
    """

    policy: SelectorPolicy = "default"
    attributes: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.policy not in get_args(SelectorPolicy):
            raise ConfigurationError(f"unknown element selector policy: {self.policy}")

        if self.attributes is not None:
            if isinstance(self.attributes, str):
                raise ConfigurationError(f"expected a list of attribute names but got a string: {self.attributes}")
            object.__setattr__(self, "attributes", tuple(self.attributes))

        if self.policy in _ATTRIBUTE_POLICIES:
            if self.attributes is None:
                raise ConfigurationError(f"policy {self.policy} requires a list of attribute names")
        elif self.attributes is not None:
            raise ConfigurationError(f"policy {self.policy} takes no attribute names")

    @classmethod
    def from_dict(cls, data: JsonType) -> "SelectorOptions":
        """
        Creates options from a JSON object, e.g. one loaded from a configuration file.

        :raises ConfigurationError: The object has unrecognized keys or values of the wrong type.
        """

        if not isinstance(data, dict):
            raise ConfigurationError(f"expected a JSON object for element selector options but got: {data!r}")

        try:
            return json_to_object(cls, data)
        except (BaseValidationError, ForbiddenExtraKeysError) as ex:
            raise ConfigurationError(f"invalid element selector options: {ex}") from ex


def selector_from_options(options: SelectorOptions) -> ElementSelector:
    "Returns the element selector that implements the configured policy."

    LOGGER.debug("Using element selector policy: %s", options.policy)

    if options.policy == "by-name-and-attributes":
        return by_name_and_attributes(options.attributes)
    elif options.policy == "by-name-and-attributes-control-ns":
        return by_name_and_attributes_control_ns(options.attributes)
    else:
        return _SIMPLE_SELECTORS[options.policy]
