"""
safecoll - Null-tolerant helpers over in-memory collections.

safecoll treats None as an empty container everywhere and offers
membership search, type-directed lookup, grouping, filtering and
element-wise transformation without mutating its inputs.
"""

import logging

from safecoll.collections import (
    Equality,
    array_to_list,
    contains,
    contains_any,
    contains_instance,
    filter,
    find_common_element_type,
    find_first_match,
    find_unique,
    find_value_of_type,
    find_value_of_types,
    for_each,
    has_unique_object,
    is_empty,
    is_not_empty,
    merge_properties_into_map,
    select_list,
    select_list_with_index,
    select_not_null_list,
    to_array,
    to_map,
    to_map_list,
)
from safecoll.utils.errors import IllegalArgumentError, SafeCollError

# Host applications configure handlers; the library stays silent by default.
logging.getLogger("safecoll").addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Errors
    "SafeCollError",
    "IllegalArgumentError",
    # Comparison
    "Equality",
    # Emptiness
    "is_empty",
    "is_not_empty",
    # Array bridging
    "array_to_list",
    "to_array",
    # Mapping merge
    "merge_properties_into_map",
    # Membership
    "contains",
    "contains_instance",
    "contains_any",
    "find_first_match",
    # Single value search
    "find_unique",
    "find_value_of_type",
    "find_value_of_types",
    # Homogeneity
    "has_unique_object",
    "find_common_element_type",
    # Grouping
    "to_map",
    "to_map_list",
    # Transformation
    "filter",
    "select_list",
    "select_not_null_list",
    "select_list_with_index",
    "for_each",
]
