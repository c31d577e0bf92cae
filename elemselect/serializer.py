"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

from typing import Any, TypeVar

from cattrs.preconf.json import make_converter

JsonType = None | bool | int | float | str | dict[str, "JsonType"] | list["JsonType"]

T = TypeVar("T")


_converter = make_converter(forbid_extra_keys=True)


def names_structure_hook(value: Any, cls: type[tuple[str, ...]]) -> tuple[str, ...]:
    # a string is iterable but is never a list of names
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected a list of names but got: {value!r}")
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"expected a name but got: {item!r}")
    return tuple(value)


_converter.register_structure_hook_func(lambda t: t == tuple[str, ...], names_structure_hook)


def json_to_object(typ: type[T], data: JsonType) -> T:
    """
    Converts a raw JSON object to a structured object, validating input data.

    :param typ: Target structured type.
    :param data: Source data as a JSON object.
    :returns: A valid object instance of the expected type.
    """

    return _converter.structure(data, typ)
