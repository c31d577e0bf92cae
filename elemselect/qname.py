"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

from dataclasses import dataclass
from typing import Union

import lxml.etree as ET


@dataclass(frozen=True)
class QualifiedName:
    """
    Identifies an element or attribute by namespace and local name.

    :param namespace_uri: Namespace URI, or `None` for the null namespace.
    :param local_name: Local part of the name.
    """

    namespace_uri: str | None
    local_name: str

    def __post_init__(self) -> None:
        if not self.namespace_uri:
            object.__setattr__(self, "namespace_uri", None)

    @classmethod
    def parse(cls, text: str) -> "QualifiedName":
        "Parses a name in Clark notation `{uri}local`, or a plain local name."

        if text.startswith("{"):
            uri, sep, local = text[1:].partition("}")
            if not sep or not local:
                raise ValueError(f"malformed qualified name: {text}")
            return cls(uri, local)
        else:
            if not text:
                raise ValueError("empty local name")
            return cls(None, text)

    @classmethod
    def of(cls, name: Union["QualifiedName", str, ET.QName]) -> "QualifiedName":
        if isinstance(name, QualifiedName):
            return name
        elif isinstance(name, ET.QName):
            return cls(name.namespace, name.localname)
        elif isinstance(name, str):
            return cls.parse(name)
        else:
            raise NotImplementedError("type match not exhaustive")

    def __str__(self) -> str:
        if self.namespace_uri is None:
            return self.local_name
        return f"{{{self.namespace_uri}}}{self.local_name}"
