"""
Sorting without random access.

A data source may only be able to fetch ranges of rows, asynchronously. Sorting it with a comparator on the values
would need the values of arbitrary rows at arbitrary moments; instead we read each sort column once, in full, and
replace its values by their ranks. The permutation is then computed on the ranks alone, and any number of sort keys
(in any direction) can be combined without going back to the data.

Ranks are ascending and tie-aware: equal values get the same rank, namely the rank of the first of them in sorted order.
Descending order is obtained by flipping the sign of the comparison of two ranks, never by remapping the rank values
(`num_rows - rank - 1` would assign ties the rank of the *last* of them in descending order, and mixing such values with
ascending ranks of other keys breaks the grouping of ties).
"""
import functools

from kivy.logger import Logger

from tallgrid.errors import DataConsistencyError, InvalidColumnError, InvalidOrderByError
from tallgrid.sort.structure import ASCENDING, DESCENDING

# The pseudo-column of the implicit last sort key: the data index itself, ascending. It makes the permutation
# deterministic whatever the ties in the real sort keys.
INDEX_RANKS_KEY = ""


class OrderByWithRanks(object):
    def __init__(self, direction, ranks, column=None):
        self.direction = direction
        self.ranks = ranks
        self.column = column

    def __repr__(self):
        return "OrderByWithRanks(%r, %r, %s)" % (self.column, self.direction, self.ranks)


def compute_ranks(values):
    """
    >>> compute_ranks([2, 3, 1, 1])
    [2, 3, 0, 0]
    >>> compute_ranks(["b", "a", "b", "c"])
    [1, 0, 1, 3]
    >>> compute_ranks([])
    []
    """
    # sorted() is stable: among equal values the first in data order comes first
    try:
        order = sorted(range(len(values)), key=values.__getitem__)
    except TypeError as e:
        raise InvalidColumnError("Values cannot be compared: %s (types: %s)" % (
            e, ", ".join(sorted(set(type(v).__name__ for v in values)))))

    ranks = [-1] * len(values)
    previous_rank = 0
    for rank, index in enumerate(order):
        if rank > 0 and values[index] == values[order[rank - 1]]:
            ranks[index] = previous_rank
        else:
            ranks[index] = rank
            previous_rank = rank

    return ranks


def index_ranks(num_rows):
    return list(range(num_rows))


def compute_data_indexes(order_by_with_ranks):
    """
    The permutation for the given sort keys: result[table_index] = data_index.

    >>> ages = [30, 20, 30, 20]
    >>> names = [3, 0, 1, 2]
    >>> compute_data_indexes([OrderByWithRanks(ASCENDING, compute_ranks(ages))])
    [1, 3, 0, 2]
    >>> compute_data_indexes([OrderByWithRanks(DESCENDING, compute_ranks(ages))])
    [0, 2, 1, 3]
    >>> compute_data_indexes([OrderByWithRanks(DESCENDING, compute_ranks(ages)),
    ...                       OrderByWithRanks(DESCENDING, compute_ranks(names))])
    [0, 2, 3, 1]
    """
    if not order_by_with_ranks:
        raise InvalidOrderByError("orderByWithRanks should have at least one element")

    num_rows = len(order_by_with_ranks[0].ranks)
    for item in order_by_with_ranks:
        if item.direction not in (ASCENDING, DESCENDING):
            raise InvalidOrderByError("Invalid direction: %s" % item.direction)
        if len(item.ranks) != num_rows:
            raise DataConsistencyError("Invalid ranks: expected %s values, got %s" % (num_rows, len(item.ranks)))

    keys = list(order_by_with_ranks)
    if not any(item.column == INDEX_RANKS_KEY for item in keys):
        keys.append(OrderByWithRanks(ASCENDING, index_ranks(num_rows), column=INDEX_RANKS_KEY))

    def compare(a, b):
        for item in keys:
            sign = 1 if item.direction == ASCENDING else -1
            rank_a = item.ranks[a]
            rank_b = item.ranks[b]
            if rank_a < rank_b:
                return -sign
            if rank_a > rank_b:
                return sign
        return 0

    Logger.debug("TallGrid: computing the permutation of %s rows for %s sort keys" % (
        num_rows, len(order_by_with_ranks)))

    return sorted(range(num_rows), key=functools.cmp_to_key(compare))


def invert_permutation_indexes(permutation):
    """
    >>> invert_permutation_indexes([5, 0, 3, 1, 2, 4])
    [1, 3, 4, 2, 5, 0]
    >>> invert_permutation_indexes([0, 0])
    Traceback (most recent call last):
    ...
    tallgrid.errors.DataConsistencyError: Duplicate index: 0
    """
    num_rows = len(permutation)
    result = [None] * num_rows

    for table_index, data_index in enumerate(permutation):
        if not isinstance(data_index, int) or isinstance(data_index, bool) or not 0 <= data_index < num_rows:
            raise DataConsistencyError("Invalid index: %s" % (data_index,))
        if result[data_index] is not None:
            raise DataConsistencyError("Duplicate index: %s" % data_index)
        result[data_index] = table_index

    return result
