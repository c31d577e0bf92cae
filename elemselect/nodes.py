"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

import enum
from dataclasses import dataclass

import lxml.etree as ET

from .qname import QualifiedName

ElementType = ET._Element  # pyright: ignore [reportPrivateUsage]


@enum.unique
class NodeKind(enum.Enum):
    "Kind of a node in a child node sequence."

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    PROCESSING_INSTRUCTION = "processing-instruction"
    ENTITY_REFERENCE = "entity-reference"

    @property
    def is_text(self) -> bool:
        return self is NodeKind.TEXT


@dataclass(frozen=True)
class Node:
    """
    A child node of an element.

    lxml keeps character data in the `text` and `tail` properties instead of separate nodes. This view restores the
    node sequence a DOM would expose, with text runs appearing as nodes of their own.

    :param kind: Kind of the node.
    :param element: The underlying lxml node, unless the node is a text run.
    :param text: Character data of a text run.
    """

    kind: NodeKind
    element: ElementType | None = None
    text: str | None = None


def node_kind(node: ElementType) -> NodeKind:
    "Classifies an lxml node that may appear as a child of an element."

    # comments, processing instructions and entities are subclasses of `_Element`
    if isinstance(node, ET._Comment):  # pyright: ignore [reportPrivateUsage]
        return NodeKind.COMMENT
    elif isinstance(node, ET._ProcessingInstruction):  # pyright: ignore [reportPrivateUsage]
        return NodeKind.PROCESSING_INSTRUCTION
    elif isinstance(node, ET._Entity):  # pyright: ignore [reportPrivateUsage]
        return NodeKind.ENTITY_REFERENCE
    else:
        return NodeKind.ELEMENT


def get_qname(element: ElementType) -> QualifiedName:
    "Qualified name of an element."

    qname = ET.QName(element)
    return QualifiedName(qname.namespace, qname.localname)


def get_attributes(element: ElementType) -> dict[QualifiedName, str]:
    """
    Attributes of an element keyed by qualified name.

    Namespace declarations are not attributes in lxml, and are thus never included.
    """

    return {QualifiedName.parse(key): value for key, value in element.attrib.items()}


def get_merged_nested_text(element: ElementType) -> str | None:
    """
    Character data of the direct text children of an element, concatenated in document order.

    :returns: Merged text, or `None` if the element has no direct text content.
    """

    parts: list[str] = []
    if element.text:
        parts.append(element.text)
    for child in element:
        if child.tail:
            parts.append(child.tail)
    return "".join(parts) or None


def get_child_nodes(element: ElementType) -> list[Node]:
    "Ordered child nodes of an element, with text runs included."

    nodes: list[Node] = []
    if element.text:
        nodes.append(Node(NodeKind.TEXT, text=element.text))
    for child in element:
        nodes.append(Node(node_kind(child), element=child))
        if child.tail:
            nodes.append(Node(NodeKind.TEXT, text=child.tail))
    return nodes
