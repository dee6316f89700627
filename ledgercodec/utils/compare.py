# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Ordering helpers used to put collections in canonical form.

A comparator is a function `(a, b) -> int` that returns a negative number when `a` sorts first, zero when both are
equivalent and a positive number otherwise.

>>> to_sorted_set([3, 1, 2, 1], natural_compare)
[1, 2, 3]

Entries that compare equal are collapsed and the last one (in input order) is the one kept:

>>> by_first = lambda a, b: natural_compare(a[0], b[0])
>>> to_sorted_set([('b', 1), ('a', 1), ('b', 2)], by_first)
[('a', 1), ('b', 2)]
"""

from functools import cmp_to_key
from typing import Any, Callable, Iterable, TypeVar

from structlog import get_logger

logger = get_logger()

T = TypeVar('T')

Comparator = Callable[[T, T], int]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the `<` and `>` operators of the values."""
    return (a > b) - (a < b)


def to_sorted_set(items: Iterable[T], compare: Comparator[T]) -> list[T]:
    """Sort `items` by `compare` and collapse every run of equal entries into its last occurrence."""
    # sorted() is stable, so inside a run of equal entries the input order is preserved
    ordered = sorted(items, key=cmp_to_key(compare))
    result: list[T] = []
    for item in ordered:
        if result and compare(result[-1], item) == 0:
            result[-1] = item
        else:
            result.append(item)
    dropped = len(ordered) - len(result)
    if dropped:
        logger.debug('duplicates collapsed', dropped=dropped, kept=len(result))
    return result
