"""
Merge-Insertion Sort a.k.a. Ford-Johnson Algorithm
==================================================

The Ford-Johnson algorithm[1], also known as the merge-insertion sort[2,3], pairs up the items,
recursively sorts the larger item of each pair, and then inserts the smaller items into that sorted
sequence in a specially chosen order derived from the Jacobsthal numbers. This keeps the number of
comparisons close to the information-theoretic lower bound of ⌈log₂(n!)⌉, so it is well suited for
small to moderate lists of items whose comparison is much more expensive than moving them around.

>>> from ford_johnson import merge_insertion_sort, insertion_order
>>> merge_insertion_sort([3, 0, 2, 5, 4, 1])
[0, 1, 2, 3, 4, 5]
>>> merge_insertion_sort('DABEC')
['A', 'B', 'C', 'D', 'E']
>>> insertion_order(5)
[0, 1, 3, 2, 4]

**References**

1. Ford, L. R., & Johnson, S. M. (1959). A Tournament Problem.
   The American Mathematical Monthly, 66(5), 387-389. https://doi.org/10.1080/00029890.1959.11989306
2. Knuth, D. E. (1998). The Art of Computer Programming: Volume 3: Sorting and Searching (2nd ed.).
   Addison-Wesley. https://cs.stanford.edu/~knuth/taocp.html#vol3
3. https://en.wikipedia.org/wiki/Merge-insertion_sort

Command-Line Usage
------------------

::

    $ python -m ford_johnson 3 0 2 5 4 1
    Before: 3 0 2 5 4 1
    After : 0 1 2 3 4 5
    Time to process a range of 6 elements with merge-insertion sort : 12.00000 us

API
---

.. autoclass:: ford_johnson.T

.. autofunction:: ford_johnson.merge_insertion_sort

.. autofunction:: ford_johnson.insertion_order

.. autofunction:: ford_johnson.max_comparisons

.. autofunction:: ford_johnson.min_comparisons

Author, Copyright and License
-----------------------------

Copyright © 2025 Hauke Dämpfling (haukex@zero-g.net)

Permission to use, copy, modify, and/or distribute this software for any
purpose with or without fee is hereby granted, provided that the above
copyright notice and this permission notice appear in all copies.

THE SOFTWARE IS PROVIDED “AS IS” AND THE AUTHOR DISCLAIMS ALL WARRANTIES
WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.
"""
import logging
from collections.abc import Generator, Sequence
from typing import TypeVar, Optional, Any
from itertools import islice
from bisect import bisect_left
from operator import itemgetter
from math import factorial

_log = logging.getLogger(__name__)

#: A type of object that can be sorted by :func:`merge_insertion_sort`.
#: Must support the ``<`` operator as a total order.
T = TypeVar('T')

# Helper that generates the Jacobsthal numbers, which are the boundaries of the insertion groups.
def _jacobsthal() -> Generator[int, None, None]:
    # <https://oeis.org/A001045>: a(n) = a(n-1) + 2*a(n-2), with a(0) = 0, a(1) = 1.
    prev :int = 0
    cur :int = 1
    yield prev
    while True:
        yield cur
        prev, cur = cur, cur + 2*prev

def insertion_order(n :int) -> list[int]:
    """Generates the order in which the smaller items of the pairs are inserted into the sorted sequence.

    The first two indices are ``0`` and ``1``, the remaining indices are grouped by consecutive Jacobsthal
    numbers (``1, 3, 5, 11, 21, 43, ...``), and within each group the indices are listed from largest to smallest:
    ``0, 1, 3, 2, 5, 4, 11, 10, 9, 8, 7, 6, 21, 20, ...``. The last group is truncated to ``n-1``.

    :param n: The number of items to be inserted.
    :return: A permutation of ``range(n)``.
    """
    if n<0:
        raise ValueError("must specify zero or more items")
    if n<2:
        return list(range(n))
    order :list[int] = [0, 1]
    prev :int = 1
    # consecutive Jacobsthal numbers bound the groups, i.e. (prev, bound) advance together, not one after the other
    for bound in islice(_jacobsthal(), 3, None):  # skip 0, 1, 1
        if len(order) >= n:
            break
        order.extend( range(min(bound, n-1), prev, -1) )
        prev = bound
    assert len(order)==n
    return order

# While sorting, each item is wrapped in a list, a "node", with the item at node[0]. The nodes of a pair
# are [larger item, larger node, smaller node]. Nodes are only ever located by identity, so the items
# themselves don't need to be hashable, and even equal items keep their pairing straight.
_Node = list[Any]

# Helper function to insert a node into a sorted array of nodes via binary search, limiting the search to array[:hi].
# Inserts **before** the first item not less than the new item, and returns the index of the insertion.
# All comparisons while merging go through here (bisect only uses the `<` operator).
def _bin_insert(array :list[_Node], node :_Node, hi :Optional[int] = None) -> int:
    idx = bisect_left(array, node[0], 0, len(array) if hi is None else hi, key=itemgetter(0))
    array.insert(idx, node)
    return idx

# Finds the index of an object in an array by object identity (instead of equality).
def _ident_find(array :Sequence[T], item :T) -> int:
    for i,e in enumerate(array):
        if e is item:
            return i
    raise IndexError(f"failed to find item {item!r} in array")

def merge_insertion_sort(array :Sequence[T]) -> list[T]:
    """Merge-Insertion Sort (Ford-Johnson algorithm).

    :param array: Array to sort. **Items should be distinct**; if they aren't, the result is
        still sorted, but the comparison counts of :func:`max_comparisons` no longer apply.
    :return: A shallow copy of the array sorted in ascending order.
    """
    return [ node[0] for node in _merge_insertion_sort([ [item] for item in array ]) ]

def _merge_insertion_sort(nodes :list[_Node]) -> list[_Node]:
    if len(nodes)<2:
        return list(nodes)

    # 1. Group the items into ⌊n/2⌋ pairs, leaving one item unpaired if there is an odd number of items,
    #    and perform one comparison per pair to determine the larger of the two items.
    pairs :list[_Node] = []
    for i in range(0, len(nodes)-1, 2):
        if nodes[i+1][0] < nodes[i][0]:
            pairs.append([ nodes[i][0], nodes[i], nodes[i+1] ])
        else:
            pairs.append([ nodes[i+1][0], nodes[i+1], nodes[i] ])
    leftover :Optional[_Node] = nodes[-1] if len(nodes) % 2 else None
    _log.debug("merge_insertion_sort: %d items, %d pairs, leftover %r",
        len(nodes), len(pairs), None if leftover is None else leftover[0])

    # 2. Recursively sort the pairs by their larger items. This is the "main chain" the other items are inserted into,
    #    and the k-th smaller item belongs to the k-th item of the main chain.
    sorted_pairs = _merge_insertion_sort(pairs)
    larger = [ p[1] for p in sorted_pairs ]
    smaller = [ p[2] for p in sorted_pairs ]

    # 3. Insert the smaller items in the order given by insertion_order. Since each smaller item is known
    #    to be less than its larger item, the binary search only needs to cover the main chain up to (but
    #    not including) that larger item. Its current position changes with every insertion, so look it up
    #    by identity, which costs no comparisons. Note the first smaller item goes in without a comparison.
    chain :list[_Node] = list(larger)
    for k in insertion_order(len(smaller)):
        _bin_insert(chain, smaller[k], _ident_find(chain, larger[k]))

    # 4. The leftover item, if any, has no known relation to anything, so it is searched across the whole chain.
    if leftover is not None:
        _bin_insert(chain, leftover)

    return chain

def max_comparisons(n :int) -> int:
    """Returns the maximum number of comparisons that :func:`merge_insertion_sort` will perform depending on the input length.

    This is a guaranteed upper bound, not the exact worst case: it assumes every search range is as large as it
    could possibly be, so for long lists it is considerably looser than the counts seen in practice (for example
    9277 for 1000 items, where ⌈log₂(1000!)⌉ is 8530 and random inputs need around 8550 to 8600).

    :param n: The number of items in the list to be sorted.
    :return: The maximum number of comparisons.
    """
    if n<0:
        raise ValueError("must specify zero or more items")
    if n<2:
        return 0
    half = n//2
    # one comparison per pair, plus sorting the larger items
    total = half + max_comparisons(half)
    # When the k-th smaller item is inserted after t others, the part of the chain before its larger item holds
    # the k larger items below it plus at most the t items inserted so far. A binary search over m items takes
    # at most m.bit_length() comparisons.
    for t, k in enumerate(insertion_order(half)):
        total += (k+t).bit_length()
    if n % 2:
        total += (2*half).bit_length()
    return total

def min_comparisons(n :int) -> int:
    """Returns the information-theoretic lower bound ⌈log₂(n!)⌉ of comparisons needed to sort ``n`` items.

    :param n: The number of items in the list to be sorted.
    :return: The minimum number of comparisons any comparison sort needs in the worst case.
    """
    if n<0:
        raise ValueError("must specify zero or more items")
    # <https://oeis.org/A003070>; for an integer x ≥ 1, ⌈log₂(x)⌉ == (x-1).bit_length()
    return (factorial(n)-1).bit_length()
