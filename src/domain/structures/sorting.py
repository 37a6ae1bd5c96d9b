"""
Field-and-direction parameterized sorts over StockRecord sequences.
See docs/CleanArchitecture.md — Phase 2 for the architectural rationale.

Two interchangeable algorithms are provided:

  - quick_sort: partition-based. First element is the pivot, recursion is
    always ascending and a descending request reverses the finished result.
    Worst case is O(n²) time and n-deep recursion on already ordered input,
    so it is only meant for small (tens of records) working sets. Descending
    output reverses the relative order of equal keys.
  - merge_sort: stable O(n log n) in both directions. This is the default for
    anything shown to a user.

Both are pure: the input is never mutated and a new list is returned.
"""

from enum import Enum
from typing import Any, Callable, Sequence, Union

from src.domain.entities.stock_record import StockRecord

KeyFunc = Callable[[StockRecord], Any]


class SortField(str, Enum):
    SYMBOL = "symbol"
    NAME = "name"
    PRICE = "price"
    CHANGE = "change"
    CHANGE_PERCENT = "change_percent"
    VOLUME = "volume"
    MARKET_CAP = "market_cap"


class SortAlgorithm(str, Enum):
    QUICK = "quick"
    MERGE = "merge"


def _key_for(field: Union[SortField, str]) -> KeyFunc:
    attribute = SortField(field).value
    return lambda record: getattr(record, attribute)


def quick_sort(
    records: Sequence[StockRecord],
    field: Union[SortField, str] = SortField.SYMBOL,
    ascending: bool = True,
) -> list[StockRecord]:
    result = _quick_sort_ascending(list(records), _key_for(field))
    if not ascending:
        result.reverse()
    return result


def _quick_sort_ascending(records: list[StockRecord], key: KeyFunc) -> list[StockRecord]:
    if len(records) <= 1:
        return list(records)

    pivot, rest = records[0], records[1:]
    pivot_key = key(pivot)
    less = [record for record in rest if key(record) < pivot_key]
    others = [record for record in rest if not key(record) < pivot_key]

    return (
        _quick_sort_ascending(less, key)
        + [pivot]
        + _quick_sort_ascending(others, key)
    )


def merge_sort(
    records: Sequence[StockRecord],
    field: Union[SortField, str] = SortField.SYMBOL,
    ascending: bool = True,
) -> list[StockRecord]:
    return _merge_sort(list(records), _key_for(field), ascending)


def _merge_sort(records: list[StockRecord], key: KeyFunc, ascending: bool) -> list[StockRecord]:
    if len(records) <= 1:
        return records

    mid = len(records) // 2
    left = _merge_sort(records[:mid], key, ascending)
    right = _merge_sort(records[mid:], key, ascending)
    return _merge(left, right, key, ascending)


def _merge(
    left: list[StockRecord],
    right: list[StockRecord],
    key: KeyFunc,
    ascending: bool,
) -> list[StockRecord]:
    result: list[StockRecord] = []
    i = j = 0
    while i < len(left) and j < len(right):
        left_key, right_key = key(left[i]), key(right[j])
        # Right wins only on a strict comparison; ties stay left-first.
        take_right = right_key < left_key if ascending else left_key < right_key
        if take_right:
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result


def sort_records(
    records: Sequence[StockRecord],
    field: Union[SortField, str] = SortField.SYMBOL,
    ascending: bool = True,
    algorithm: Union[SortAlgorithm, str] = SortAlgorithm.MERGE,
) -> list[StockRecord]:
    """Order *records* by *field* with the selected algorithm (merge sort by default).

    Raises:
        ValueError: if *field* or *algorithm* is not a known value.
    """
    if SortAlgorithm(algorithm) is SortAlgorithm.QUICK:
        return quick_sort(records, field, ascending)
    return merge_sort(records, field, ascending)
