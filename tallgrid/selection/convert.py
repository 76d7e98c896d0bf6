"""
Selections are stored in data order (the order of the rows in the data source), so that they survive a change of the
sort. The user, however, clicks rows in table order (the displayed, possibly sorted, order). The functions here bridge
the two, through the permutations of tallgrid.sort.ranks:

* data_indexes[table_index] = data_index
* table_indexes[data_index] = table_index (the inverse)
"""
from tallgrid.dataframe.helpers import validate_column
from tallgrid.dataframe.sortable import SortableDataFrame, fetch_indexes, fetch_table_indexes
from tallgrid.errors import DataConsistencyError, InvalidOrderByError
from tallgrid.memoization import Memoization
from tallgrid.selection.structure import Range, Selection
from tallgrid.selection.utils import (
    check_index,
    check_ranges,
    extend_from_anchor,
    iter_selected_indexes,
    ranges_from_indexes,
    toggle_index,
)
from tallgrid.sort.ranks import invert_permutation_indexes


def convert_selection(selection, permutation_indexes):
    """
    Maps every selected index, and the anchor, i to permutation_indexes[i].

    >>> p = [1, 3, 4, 2, 5, 0]
    >>> convert_selection(Selection([Range(0, 2)], anchor=2), p)
    Selection([Range(1, 2), Range(3, 4)], anchor=4)
    >>> convert_selection(Selection([], anchor=2), p)
    Selection([], anchor=4)
    >>> convert_selection(Selection([Range(0, 6)], anchor=2), p)
    Selection([Range(0, 6)], anchor=4)
    """
    check_ranges(selection.ranges)
    if selection.anchor is not None:
        check_index(selection.anchor, "anchor")

    num_rows = len(permutation_indexes)
    anchor = None
    if selection.anchor is not None:
        if selection.anchor >= num_rows:
            raise DataConsistencyError("Invalid anchor: %s, the permutation has %s rows" % (
                selection.anchor, num_rows))
        anchor = permutation_indexes[selection.anchor]

    ranges = selection.ranges

    if not ranges:
        return Selection([], anchor)

    if ranges[-1].end > num_rows:
        raise DataConsistencyError("The selection (%s) does not match the number of rows (%s)" % (
            ranges[-1], num_rows))

    if ranges == [Range(0, num_rows)]:
        # a permutation maps all the rows onto themselves
        return Selection([Range(0, num_rows)], anchor)

    return Selection(ranges_from_indexes(permutation_indexes[i] for i in iter_selected_indexes(ranges)), anchor)


def toggle_index_in_selection(selection, index):
    """
    >>> toggle_index_in_selection(Selection([Range(0, 1)], anchor=4), 0)
    Selection([], anchor=0)
    """
    return Selection(toggle_index(selection.ranges, index), index)


def toggle_range_in_selection(selection, index):
    """
    The shift-click on an unsorted table.

    >>> toggle_range_in_selection(Selection([Range(2, 5)], anchor=4), 0)
    Selection([Range(0, 5)], anchor=0)
    """
    check_index(index)
    check_ranges(selection.ranges)
    if selection.anchor is not None:
        check_index(selection.anchor, "anchor")

    return Selection(extend_from_anchor(selection.ranges, selection.anchor, index), index)


def extend_in_view(selection, table_index, data_indexes):
    """
    The shift-click on a sorted table, once its permutation is known. The selection (in data order) is converted to
    table order, extended from the anchor to the clicked row, and converted back. The new anchor is the data index of
    the clicked row.

    Rows in data order: Charlie, Alice, Bob, Dani. Sorted by name, Alice is selected, and the user shift-clicks the
    third row (Charlie):

    >>> extend_in_view(Selection([Range(1, 2)], anchor=1), 2, [1, 2, 0, 3])
    Selection([Range(0, 3)], anchor=0)
    """
    check_index(table_index, "table index")
    check_ranges(selection.ranges)
    if selection.anchor is not None:
        check_index(selection.anchor, "anchor")

    if table_index >= len(data_indexes):
        raise DataConsistencyError("Invalid table index: %s, the permutation has %s rows" % (
            table_index, len(data_indexes)))

    return _extend_in_view(selection, table_index, data_indexes, invert_permutation_indexes(data_indexes))


def _extend_in_view(selection, table_index, data_indexes, table_indexes):
    in_view = convert_selection(selection, table_indexes)
    extended = Selection(extend_from_anchor(in_view.ranges, in_view.anchor, table_index), table_index)
    return convert_selection(extended, data_indexes)


async def toggle_range_in_table(selection, table_index, order_by, data, memoization=None, signal=None):
    """
    The shift-click on a table sorted by `order_by`; the permutation is fetched (or taken from the cache) first.

    When `data` is a SortableDataFrame, its own cache is used (unless `memoization` is given), and the permutation is
    computed on its upstream frame.
    """
    check_index(table_index, "index")
    check_ranges(selection.ranges)
    if selection.anchor is not None:
        check_index(selection.anchor, "anchor")

    if not order_by:
        return toggle_range_in_selection(selection, table_index)

    sortable_columns = data.sortable_columns()
    for item in order_by:
        validate_column(item.column, data.header)
        if item.column not in sortable_columns:
            raise InvalidOrderByError("Data frame is not sortable")

    if isinstance(data, SortableDataFrame):
        source = data.upstream
        if memoization is None:
            memoization = data.memoization
    else:
        source = data
        if memoization is None:
            memoization = Memoization()

    data_indexes = await fetch_indexes(order_by, source, memoization, signal=signal)
    table_indexes = await fetch_table_indexes(order_by, source, memoization, signal=signal)

    if table_index >= len(data_indexes):
        raise DataConsistencyError("Invalid table index: %s, the permutation has %s rows" % (
            table_index, len(data_indexes)))

    return _extend_in_view(selection, table_index, data_indexes, table_indexes)
