"""
Compare XML elements for correspondence.

Decides whether a control element and a test element should be treated as the same logical element when two XML
documents are compared, and whether two subtrees are structurally equivalent under a chosen matching policy.
"""

from .options import SelectorOptions, selector_from_options
from .qname import QualifiedName
from .selectors import (
    ConditionalSelectorBuilder,
    ConfigurationError,
    ElementSelector,
    and_,
    by_name,
    by_name_and_all_attributes,
    by_name_and_attributes,
    by_name_and_attributes_control_ns,
    by_name_and_text,
    by_name_and_text_rec,
    conditional_builder,
    conditional_selector,
    default,
    not_,
    or_,
    selector_for_element_named,
    xor,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConditionalSelectorBuilder",
    "ConfigurationError",
    "ElementSelector",
    "QualifiedName",
    "SelectorOptions",
    "and_",
    "by_name",
    "by_name_and_all_attributes",
    "by_name_and_attributes",
    "by_name_and_attributes_control_ns",
    "by_name_and_text",
    "by_name_and_text_rec",
    "conditional_builder",
    "conditional_selector",
    "default",
    "not_",
    "or_",
    "selector_for_element_named",
    "selector_from_options",
    "xor",
]

__author__ = "Levente Hunyadi"
__copyright__ = "Copyright 2022-2026, Levente Hunyadi"
__license__ = "MIT"
__maintainer__ = "Levente Hunyadi"
__status__ = "Production"
