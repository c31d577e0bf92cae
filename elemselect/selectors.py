"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
from typing import Callable, Iterable, Union

import lxml.etree as ET

from .nodes import ElementType, Node, NodeKind, get_attributes, get_child_nodes, get_merged_nested_text, get_qname
from .qname import QualifiedName

LOGGER = logging.getLogger(__name__)

ElementSelector = Callable[[ElementType | None, ElementType | None], bool]
"Decides whether a control element and a test element correspond to one another."

ElementPredicate = Callable[[ElementType], bool]


class ConfigurationError(ValueError):
    "Raised when an element selector is constructed with invalid arguments."


def default(control: ElementType | None, test: ElementType | None) -> bool:
    """
    Any element can be compared to any other element.

    Generally this means elements are compared in document order.
    """

    return True


def by_name(control: ElementType | None, test: ElementType | None) -> bool:
    "Elements with the same local name (and namespace URI, if any) can be compared."

    return control is not None and test is not None and get_qname(control) == get_qname(test)


def by_name_and_text(control: ElementType | None, test: ElementType | None) -> bool:
    "Elements with the same local name (and namespace URI, if any) and nested text (if any) can be compared."

    return by_name(control, test) and get_merged_nested_text(control) == get_merged_nested_text(test)  # type: ignore[arg-type]


def _maps_equal_for_keys(control: dict[QualifiedName, str], test: dict[QualifiedName, str], keys: Iterable[QualifiedName]) -> bool:
    """
    True if both mappings agree on every key.

    A key agrees if it is missing from both mappings, or present in both with the same value.
    """

    for key in keys:
        if (key in control) != (key in test):
            return False
        if control.get(key) != test.get(key):
            return False
    return True


def _attribute_names(names: Iterable[Union[str, QualifiedName, ET.QName]] | None) -> tuple[QualifiedName, ...]:
    if names is None:
        raise ConfigurationError("attribute name list is required")
    if isinstance(names, str):
        raise ConfigurationError(f"expected a list of attribute names but got a string: {names}")

    qnames: list[QualifiedName] = []
    for name in names:
        if isinstance(name, str):
            # plain names are always looked up in the null namespace
            qnames.append(QualifiedName(None, name))
        elif isinstance(name, (QualifiedName, ET.QName)):
            qnames.append(QualifiedName.of(name))
        else:
            raise ConfigurationError(f"expected an attribute name but got: {name!r}")
    return tuple(qnames)


def by_name_and_attributes(names: Iterable[Union[str, QualifiedName, ET.QName]] | None) -> ElementSelector:
    """
    Elements with the same local name (and namespace URI, if any) and attribute values for the given attribute names
    can be compared.

    :param names: Attribute names. Plain strings are looked up in the null namespace.
    :returns: An element selector that compares the given attributes.
    :raises ConfigurationError: The list of attribute names is missing or holds something other than a name.
    """

    qnames = _attribute_names(names)

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        return by_name(control, test) and _maps_equal_for_keys(
            get_attributes(control),  # type: ignore[arg-type]
            get_attributes(test),  # type: ignore[arg-type]
            qnames,
        )

    return _selector


def by_name_and_attributes_control_ns(names: Iterable[str] | None) -> ElementSelector:
    """
    Elements with the same local name (and namespace URI, if any) and attribute values for the given attribute names
    can be compared.

    The namespace URI of each attribute is taken from the attribute with the same local name on the control element,
    or the null namespace if the control element has no such attribute.

    :param names: Local names of attributes.
    :returns: An element selector that compares the given attributes.
    :raises ConfigurationError: The list of attribute names is missing.
    """

    local_names = frozenset(qname.local_name for qname in _attribute_names(names))

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        if not by_name(control, test):
            return False

        control_attrs = get_attributes(control)  # type: ignore[arg-type]
        qname_by_local_name: dict[str, QualifiedName] = {}
        for qname in control_attrs.keys():
            if qname.local_name in local_names:
                qname_by_local_name[qname.local_name] = qname
        for local_name in local_names:
            if local_name not in qname_by_local_name:
                qname_by_local_name[local_name] = QualifiedName(None, local_name)

        return _maps_equal_for_keys(control_attrs, get_attributes(test), qname_by_local_name.values())  # type: ignore[arg-type]

    return _selector


def by_name_and_all_attributes(control: ElementType | None, test: ElementType | None) -> bool:
    "Elements with the same local name (and namespace URI, if any) and attribute values for all attributes can be compared."

    if not by_name(control, test):
        return False

    control_attrs = get_attributes(control)  # type: ignore[arg-type]
    test_attrs = get_attributes(test)  # type: ignore[arg-type]
    if len(control_attrs) != len(test_attrs):
        return False
    return _maps_equal_for_keys(control_attrs, test_attrs, control_attrs.keys())


def _skip_text(nodes: list[Node], index: int) -> int:
    "Index of the first node at or after `index` that is not a text run."

    while index < len(nodes) and nodes[index].kind.is_text:
        index += 1
    return index


def by_name_and_text_rec(control: ElementType | None, test: ElementType | None) -> bool:
    """
    Elements with the same local name (and namespace URI, if any) and child elements and nested text at each level
    (if any) can be compared.

    Text runs between child nodes are not matched one by one; instead, the merged text of each element must match.
    Comments and processing instructions must pair up by kind and position but their content is ignored.
    """

    if not by_name_and_text(control, test):
        return False

    control_children = get_child_nodes(control)  # type: ignore[arg-type]
    test_children = get_child_nodes(test)  # type: ignore[arg-type]

    control_index = test_index = 0
    while control_index < len(control_children) and test_index < len(test_children):
        # find next non-text child nodes
        control_index = _skip_text(control_children, control_index)
        if control_index >= len(control_children):
            break
        test_index = _skip_text(test_children, test_index)
        if test_index >= len(test_children):
            break

        c = control_children[control_index]
        t = test_children[test_index]
        if c.kind is not t.kind:
            LOGGER.debug("Child node kinds differ: %s in control and %s in test", c.kind.value, t.kind.value)
            return False
        if c.kind is NodeKind.ELEMENT and not by_name_and_text_rec(c.element, t.element):
            return False

        control_index += 1
        test_index += 1

    # some non-text children remained
    if _skip_text(control_children, control_index) < len(control_children):
        LOGGER.debug("Unmatched child node in control element %s", get_qname(control))  # type: ignore[arg-type]
        return False
    if _skip_text(test_children, test_index) < len(test_children):
        LOGGER.debug("Unmatched child node in test element %s", get_qname(test))  # type: ignore[arg-type]
        return False

    return True


def not_(selector: ElementSelector) -> ElementSelector:
    "Negates another element selector."

    if selector is None:
        raise ConfigurationError("selector is required")

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        return not selector(control, test)

    return _selector


def _selector_list(selectors: tuple[ElementSelector, ...]) -> tuple[ElementSelector, ...]:
    if any(selector is None for selector in selectors):
        raise ConfigurationError("selectors must not be None")
    return selectors


def or_(*selectors: ElementSelector) -> ElementSelector:
    "Accepts two elements if at least one of the given element selectors does."

    items = _selector_list(selectors)

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        return any(selector(control, test) for selector in items)

    return _selector


def and_(*selectors: ElementSelector) -> ElementSelector:
    "Accepts two elements if all of the given element selectors do."

    items = _selector_list(selectors)

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        return all(selector(control, test) for selector in items)

    return _selector


def xor(first: ElementSelector, second: ElementSelector) -> ElementSelector:
    "Accepts two elements if exactly one of the given element selectors does."

    a, b = _selector_list((first, second))

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        return a(control, test) != b(control, test)

    return _selector


def conditional_selector(predicate: ElementPredicate, selector: ElementSelector) -> ElementSelector:
    """
    Applies an element selector only if the control element satisfies a predicate.

    :param predicate: Condition checked against the control element.
    :param selector: Element selector applied when the condition holds.
    :returns: An element selector that rejects elements for which the condition fails.
    """

    if predicate is None:
        raise ConfigurationError("predicate is required")
    if selector is None:
        raise ConfigurationError("selector is required")

    def _selector(control: ElementType | None, test: ElementType | None) -> bool:
        return control is not None and predicate(control) and selector(control, test)

    return _selector


def _element_name_predicate(name: Union[str, QualifiedName, ET.QName]) -> ElementPredicate:
    if isinstance(name, str):
        return lambda element: get_qname(element).local_name == name
    elif isinstance(name, (QualifiedName, ET.QName)):
        qname = QualifiedName.of(name)
        return lambda element: get_qname(element) == qname
    else:
        raise ConfigurationError(f"expected an element name but got: {name!r}")


def selector_for_element_named(name: Union[str, QualifiedName, ET.QName], selector: ElementSelector) -> ElementSelector:
    """
    Applies an element selector only to control elements with the given name.

    A plain string is compared against the local name only; a qualified name must match in full.
    """

    return conditional_selector(_element_name_predicate(name), selector)


class ConditionalSelectorBuilder:
    """
    Builds an element selector that delegates to other selectors based on the control element.

    Conditions are checked in the order they are added; the selector of the first satisfied condition decides. If no
    condition holds, the fallback selector is used, or the elements are rejected if there is none.
    """

    _conditions: list[tuple[ElementPredicate, ElementSelector]]
    _pending: ElementPredicate | None
    _fallback: ElementSelector | None

    def __init__(self) -> None:
        self._conditions = []
        self._pending = None
        self._fallback = None

    def when(self, predicate: ElementPredicate) -> "ConditionalSelectorBuilder":
        if predicate is None:
            raise ConfigurationError("predicate is required")
        if self._pending is not None:
            raise ConfigurationError("missing `then_use` for previous condition")
        self._pending = predicate
        return self

    def when_element_is_named(self, name: Union[str, QualifiedName, ET.QName]) -> "ConditionalSelectorBuilder":
        return self.when(_element_name_predicate(name))

    def then_use(self, selector: ElementSelector) -> "ConditionalSelectorBuilder":
        if selector is None:
            raise ConfigurationError("selector is required")
        if self._pending is None:
            raise ConfigurationError("missing `when` before `then_use`")
        self._conditions.append((self._pending, selector))
        self._pending = None
        return self

    def else_use(self, selector: ElementSelector) -> "ConditionalSelectorBuilder":
        if selector is None:
            raise ConfigurationError("selector is required")
        if self._fallback is not None:
            raise ConfigurationError("fallback selector already set")
        self._fallback = selector
        return self

    def build(self) -> ElementSelector:
        if self._pending is not None:
            raise ConfigurationError("missing `then_use` for last condition")

        conditions = tuple(self._conditions)
        fallback = self._fallback

        def _selector(control: ElementType | None, test: ElementType | None) -> bool:
            for predicate, selector in conditions:
                if control is not None and predicate(control):
                    return selector(control, test)
            if fallback is not None:
                return fallback(control, test)
            return False

        return _selector


def conditional_builder() -> ConditionalSelectorBuilder:
    "Starts building a conditional element selector."

    return ConditionalSelectorBuilder()
