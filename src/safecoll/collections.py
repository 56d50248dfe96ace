"""
safecoll Collections Module.

Null-tolerant helpers over sequences, sets, mappings and arrays. ``None`` is
accepted wherever a container is expected and behaves as an empty one.
Apart from merge_properties_into_map, no helper mutates its arguments and
every container returned is newly allocated.
"""

from __future__ import annotations

import array as _array
import logging
from collections.abc import (
    Callable,
    Iterable,
    Mapping,
    MutableMapping,
    Sequence,
    Sized,
)
from enum import Enum, auto
from typing import Any, TypeVar

import numpy as np

from safecoll.utils.errors import IllegalArgumentError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

# Values accepted as fixed-size arrays besides numpy arrays.
_ARRAY_TYPES = (list, tuple, bytes, bytearray, _array.array, memoryview)

_MISSING = object()


# =============================================================================
# Comparison
# =============================================================================


class Equality(Enum):
    """How a candidate element is compared with the element searched for."""

    VALUE = auto()
    IDENTITY = auto()

    def matches(self, candidate: Any, element: Any) -> bool:
        """
        Compare two elements under this strategy.

        VALUE treats two Nones as equal and compares numpy arrays
        element-wise. IDENTITY only accepts the very same object.
        """
        if candidate is element:
            return True
        if self is Equality.IDENTITY:
            return False
        if isinstance(candidate, np.ndarray) or isinstance(element, np.ndarray):
            return bool(np.array_equal(candidate, element))
        return bool(candidate == element)


# =============================================================================
# Emptiness
# =============================================================================


def is_empty(obj: Sized | np.ndarray | None) -> bool:
    """
    Return True if obj is None or has no elements.

    Works for sequences, sets, mappings and arrays, numpy arrays included.
    Objects without a length, such as generators, raise TypeError as len()
    does; their emptiness cannot be known without consuming them.

    Example:
        is_empty(None) -> True
        is_empty({}) -> True
        is_empty(np.zeros(0)) -> True
    """
    if obj is None:
        return True
    if isinstance(obj, np.ndarray):
        return obj.size == 0
    return len(obj) == 0


def is_not_empty(obj: Sized | np.ndarray | None) -> bool:
    """Return True if obj holds at least one element."""
    return not is_empty(obj)


def _is_absent(collection: Any) -> bool:
    # Unsized iterables can only be judged by iterating them.
    if collection is None or isinstance(collection, (Sized, np.ndarray)):
        return is_empty(collection)
    return False


def _items(collection: Iterable[T] | None) -> Iterable[T]:
    return () if collection is None else collection


# =============================================================================
# Array Bridging
# =============================================================================


def array_to_list(source: Any) -> list:
    """
    Convert a fixed-size array into a new list.

    numpy arrays are converted to native Python scalars; multi-dimensional
    arrays become nested lists. A None source gives an empty list.

    Raises:
        IllegalArgumentError: If source is not an array.
    """
    if source is None:
        return []
    if isinstance(source, np.ndarray) and source.ndim > 0:
        return source.tolist()
    if isinstance(source, _ARRAY_TYPES):
        return list(source)
    logger.debug(f"Rejected non-array source of type {type(source).__name__}")
    raise IllegalArgumentError(
        f"Source is not an array: {type(source).__name__}", "source"
    )


def to_array(enumeration: Iterable[T] | None, dtype: Any = object) -> np.ndarray:
    """
    Drain an enumeration into a new one-dimensional array of the given dtype.

    Unsized string and bytes dtypes (str, bytes) take the width of the
    longest element. Elements that only fit dtype through a cast to another
    kind, such as floats into an integer array, are rejected.

    Raises:
        TypeError: If the elements cannot be cast to dtype within its kind.

    Example:
        to_array(iter([1, 2, 3]), dtype=np.int64) -> array([1, 2, 3])
        to_array(iter(["abc", "de"]), dtype=str) -> array(['abc', 'de'])
    """
    elements = list(_items(enumeration))
    target = np.dtype(dtype)
    if target.kind == "O":
        result = np.empty(len(elements), dtype=target)
        # Slot-wise assignment keeps nested sequences as single object elements.
        for index, element in enumerate(elements):
            result[index] = element
        return result
    if target.kind in "SUV" and target.itemsize == 0:
        return np.array(elements, dtype=target)
    if not elements:
        return np.empty(0, dtype=target)
    return np.asarray(elements).astype(target, casting="same_kind")


# =============================================================================
# Mapping Merge
# =============================================================================


def merge_properties_into_map(
    props: Mapping[K, V] | None, target: MutableMapping[K, V] | None
) -> None:
    """
    Copy every key/value pair of props into target, in place.

    This is the only helper that mutates an argument. Keys of target not
    present in props are kept. Inherited keys of chained property sources
    (collections.ChainMap, configparser sections) are merged as well.

    Args:
        props: Properties to merge, None merges nothing
        target: Map receiving the properties

    Raises:
        IllegalArgumentError: If target is None.
    """
    if target is None:
        raise IllegalArgumentError("Map must not be null", "target")
    if props is None:
        return
    count = 0
    for key in props:
        target[key] = props[key]
        count += 1
    logger.debug(f"Merged {count} properties into map")


# =============================================================================
# Membership
# =============================================================================


def contains(
    iterator: Iterable[Any] | None,
    element: Any,
    equality: Equality = Equality.VALUE,
) -> bool:
    """
    Check whether an iterator or enumeration yields the given element.

    Stops at the first match, so a one-shot iterator is only consumed up to
    it.

    Example:
        contains(iter([1, None]), None) -> True
    """
    for candidate in _items(iterator):
        if equality.matches(candidate, element):
            return True
    return False


def contains_instance(collection: Iterable[Any] | None, element: Any) -> bool:
    """Check whether the collection holds this very instance, not an equal one."""
    return contains(collection, element, Equality.IDENTITY)


def contains_any(source: Iterable[Any] | None, candidates: Iterable[Any] | None) -> bool:
    """Return True if any candidate is a member of source."""
    if _is_absent(source) or _is_absent(candidates):
        return False
    return any(candidate in source for candidate in candidates)


def find_first_match(
    source: Iterable[Any] | None, candidates: Iterable[T] | None
) -> T | None:
    """
    Return the first candidate, in candidates' order, that is in source.

    Membership uses source's own ``in`` test, so source should be a
    container rather than a one-shot iterator.

    Example:
        find_first_match({2, 4, 6}, [5, 4, 3]) -> 4
    """
    if _is_absent(source) or _is_absent(candidates):
        return None
    for candidate in candidates:
        if candidate in source:
            return candidate
    return None


# =============================================================================
# Single Value Search
# =============================================================================


def find_unique(
    collection: Iterable[T] | None, predicate: Callable[[T], bool] | None
) -> T | None:
    """
    Return the only element satisfying predicate.

    None is returned when no element matches and also when several do, as
    there is no clear single value then.
    """
    if _is_absent(collection) or predicate is None:
        return None
    found = False
    value = None
    for element in collection:
        if predicate(element):
            if found:
                logger.debug("More than one value matched, no clear single value")
                return None
            found = True
            value = element
    return value


def find_value_of_type(collection: Iterable[Any] | None, type_: Any = None) -> Any:
    """
    Find a single value of the given type in the collection.

    A None type matches every element. A list or tuple of types is searched
    in priority order, see find_value_of_types.

    Example:
        find_value_of_type(["a", 1, "b"], int) -> 1
        find_value_of_type(["a", "b"], str) -> None
    """
    if isinstance(type_, (list, tuple)):
        return find_value_of_types(collection, type_)
    if type_ is None:
        return find_unique(collection, lambda element: True)
    return find_unique(collection, lambda element: isinstance(element, type_))


def find_value_of_types(
    collection: Iterable[Any] | None, types: Sequence[type] | None
) -> Any:
    """
    Find a single value of one of the given types, trying each in order.

    The collection is iterated once per type tried and must be re-iterable.
    """
    if _is_absent(collection) or not types:
        return None
    for type_ in types:
        value = find_value_of_type(collection, type_)
        if value is not None:
            return value
    return None


# =============================================================================
# Homogeneity
# =============================================================================


def has_unique_object(collection: Iterable[Any] | None) -> bool:
    """
    Return True if every element is the same instance as the first.

    An empty collection has no unique object and gives False.
    """
    iterator = iter(_items(collection))
    candidate = next(iterator, _MISSING)
    if candidate is _MISSING:
        return False
    return all(Equality.IDENTITY.matches(element, candidate) for element in iterator)


def find_common_element_type(collection: Iterable[Any] | None) -> type | None:
    """Return the exact type shared by all non-None elements, or None."""
    candidate = None
    for value in _items(collection):
        if value is None:
            continue
        if candidate is None:
            candidate = type(value)
        elif type(value) is not candidate:
            return None
    return candidate


# =============================================================================
# Grouping
# =============================================================================


def _identity(value: T) -> T:
    return value


def to_map(
    elements: Iterable[V] | None, key_builder: Callable[[V], K] | None
) -> dict[K, V]:
    """
    Index elements by key_builder(element).

    When two elements share a key the later one wins.

    Example:
        to_map(["a", "bb", "cc"], len) -> {1: "a", 2: "cc"}
    """
    if _is_absent(elements) or key_builder is None:
        return {}
    return {key_builder(element): element for element in elements}


def to_map_list(
    elements: Iterable[T] | None,
    key_func: Callable[[T], K] | None,
    value_func: Callable[[T], V] | None = _identity,
) -> dict[K, list[V]]:
    """
    Group value_func(element) by key_func(element).

    Each group keeps the relative order of its elements. value_func
    defaults to the element itself; passing None explicitly gives an
    empty result, as does a None key_func.

    Example:
        to_map_list([1, 2, 3, 4], lambda x: x % 2) -> {1: [1, 3], 0: [2, 4]}
    """
    if _is_absent(elements) or key_func is None or value_func is None:
        return {}
    result: dict[K, list[V]] = {}
    for element in elements:
        key = key_func(element)
        if key not in result:
            result[key] = []
        result[key].append(value_func(element))
    return result


# =============================================================================
# Transformation
# =============================================================================


def filter(
    source: Iterable[T] | None, predicate: Callable[[T], bool] | None
) -> list[T]:
    """Return the elements satisfying predicate, in order."""
    if _is_absent(source) or predicate is None:
        return []
    return [element for element in source if predicate(element)]


def select_list(
    source: Iterable[T] | None,
    func: Callable[[T], U] | None,
    allow_null_values: bool = True,
) -> list[U]:
    """
    Apply func to every element and collect the results in order.

    With allow_null_values=False, None results are left out.

    Example:
        select_list([1, 2, 3], lambda x: x if x > 1 else None) -> [None, 2, 3]
    """
    if _is_absent(source) or func is None:
        return []
    result: list[U] = []
    for element in source:
        value = func(element)
        if value is not None or allow_null_values:
            result.append(value)
    return result


def select_not_null_list(
    source: Iterable[T] | None, func: Callable[[T], U] | None
) -> list[U]:
    """Apply func to every element, keeping only the non-None results."""
    return select_list(source, func, allow_null_values=False)


def select_list_with_index(
    source: Iterable[T] | None, func: Callable[[T, int], U] | None
) -> list[U]:
    """
    Apply func(element, index) to every element.

    Indexes count from 0 in iteration order, whatever keys or indexes the
    source itself has.

    Example:
        select_list_with_index(["x", "y"], lambda e, i: f"{i}:{e}") -> ["0:x", "1:y"]
    """
    if _is_absent(source) or func is None:
        return []
    return [func(element, index) for index, element in enumerate(source)]


def for_each(collection: Iterable[T] | None, action: Callable[[T], Any] | None) -> None:
    """Call action on every element, in order, for its side effects."""
    if action is None:
        return
    for element in _items(collection):
        action(element)
