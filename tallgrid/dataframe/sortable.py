"""
Sorting an arbitrary dataframe.

The permutation for an order_by is computed from the ranks of the sort columns (see tallgrid.sort.ranks), which are
computed from the full columns. For a dataframe with a `fetch`, that means fetching the full sort columns first; the
results are cached in a Memoization (see tallgrid.memoization), shared by concurrent callers, and dropped whenever the
upstream frame announces that its data changed.
"""
import asyncio
import copy
import functools

from kivy.logger import Logger

from tallgrid.cancel import check_signal
from tallgrid.dataframe.events import NumRowsChange, Resolve, Update
from tallgrid.dataframe.helpers import validate_column, validate_fetch_params, validate_get_cell_params, validate_row
from tallgrid.dataframe.structure import ColumnDescriptor, DataFrame
from tallgrid.errors import AbortError, DataConsistencyError
from tallgrid.memoization import Memoization
from tallgrid.selection.utils import ranges_from_indexes
from tallgrid.sort.ranks import OrderByWithRanks, compute_data_indexes, compute_ranks, invert_permutation_indexes
from tallgrid.sort.structure import serialize_order_by, validate_order_by


class SortableDataFrame(DataFrame):
    def __init__(self, data, sortable_columns, memoization=None):
        column_descriptors = [
            ColumnDescriptor(c.name, sortable=c.name in sortable_columns, metadata=copy.deepcopy(c.metadata))
            for c in data.column_descriptors]

        super(SortableDataFrame, self).__init__(data.num_rows, column_descriptors, copy.deepcopy(data.metadata))
        self.upstream = data
        self.exclusive_sort = data.exclusive_sort
        self.memoization = memoization if memoization is not None else Memoization()
        self._disconnect = data.channel.connect(self.receive)

    def receive(self, event):
        if isinstance(event, (Update, NumRowsChange)):
            Logger.debug("TallGrid: upstream %s, dropping the cached ranks and permutations" % event)
            self.memoization.clear()

        if isinstance(event, NumRowsChange):
            # set directly: the event is relayed below
            self._num_rows = event.num_rows

        self.channel.broadcast(event)

    def dispose(self):
        """Stop listening to the upstream frame. Idempotent."""
        self._disconnect()

    def get_upstream_row(self, row, order_by=None):
        """The upstream index of the row at position `row` in the given order; None if the order is not known yet."""
        validate_row(row, self.num_rows)
        validate_order_by(order_by, self.sortable_columns())

        if not order_by:
            return row

        data_indexes = self.memoization.indexes_by_order_by.get(serialize_order_by(order_by))
        if data_indexes is None:
            return None
        return data_indexes[row]

    def get_row_number(self, row, order_by=None):
        upstream_row = self.get_upstream_row(row, order_by)
        if upstream_row is None:
            return None
        return self.upstream.get_row_number(upstream_row)

    def get_cell(self, row, column, order_by=None):
        validate_get_cell_params(row, column, order_by, self)
        upstream_row = self.get_upstream_row(row, order_by)
        if upstream_row is None:
            return None
        return self.upstream.get_cell(upstream_row, column)

    async def fetch(self, row_start, row_end, columns=None, order_by=None, signal=None):
        validate_fetch_params(row_start, row_end, columns, order_by, self)
        check_signal(signal)

        if not order_by:
            if self.upstream.fetch is not None:
                await self.upstream.fetch(row_start, row_end, columns=columns, signal=signal)
            return

        if row_start == row_end:
            return

        key = serialize_order_by(order_by)
        known = key in self.memoization.indexes_by_order_by
        data_indexes = await fetch_indexes(order_by, self.upstream, self.memoization, signal=signal)
        if not known:
            # the row numbers in this order are now available
            self.channel.broadcast(Resolve())

        if columns and self.upstream.fetch is not None:
            await fetch_from_indexes(self.upstream, data_indexes[row_start:row_end], columns, signal=signal)


def sortable_dataframe(data, sortable_columns=None, memoization=None):
    """
    Makes the given columns (all of them if None) of `data` sortable. Returns `data` itself if its columns are already
    sortable exactly as requested.

    >>> from tallgrid.dataframe.array import array_dataframe
    >>> data = sortable_dataframe(array_dataframe([{"name": "b"}, {"name": "a"}]))
    >>> data.sortable_columns()
    {'name'}
    >>> sortable_dataframe(data) is data
    True
    """
    header = data.header
    if sortable_columns is None:
        sortable_columns = set(header)
    else:
        sortable_columns = set(sortable_columns)
        for column in sortable_columns:
            validate_column(column, header)

    if data.sortable_columns() == sortable_columns:
        return data

    return SortableDataFrame(data, sortable_columns, memoization)


async def fetch_from_indexes(data, data_indexes, columns, signal=None):
    """Fetch the given rows of `data`, in as few calls as possible (one per run of consecutive indexes)."""
    await asyncio.gather(*[
        data.fetch(range_.start, range_.end, columns=columns, signal=signal)
        for range_ in ranges_from_indexes(data_indexes)])
    check_signal(signal)


async def _compute_column_ranks(column, data, memoization, generation):
    try:
        num_rows = data.num_rows
        if data.fetch is not None and num_rows > 0:
            # no signal: this computation is shared between callers, and is useful to all of them
            await data.fetch(0, num_rows, columns=[column])

        if not memoization.is_current(generation) or data.num_rows != num_rows:
            Logger.debug("TallGrid: discarding the ranks of column %s, the data changed meanwhile" % column)
            raise AbortError("Data changed while computing the ranks of column %s" % column)

        values = []
        for row in range(num_rows):
            cell = data.get_cell(row, column)
            if cell is None:
                raise DataConsistencyError("Cell not available after fetch: row %s, column %s" % (row, column))
            values.append(cell.value)

        ranks = compute_ranks(values)
        memoization.ranks_by_column[column] = ranks
        return ranks
    finally:
        if memoization.pending_ranks.get(column) is asyncio.current_task():
            del memoization.pending_ranks[column]


def _log_failed_ranks(column, task):
    # the callers may all have given up before the shared computation failed
    if task.cancelled():
        return
    error = task.exception()
    if isinstance(error, AbortError):
        Logger.debug("TallGrid: computing the ranks of column %s was aborted: %s" % (column, error))
    elif error is not None:
        Logger.warning("TallGrid: computing the ranks of column %s failed: %s" % (column, error))


async def fetch_ranks(column, data, memoization, signal=None):
    """
    The ranks of `column`, from the cache if possible. Concurrent calls for the same column share a single computation;
    cancelling one caller (through its signal, or by cancelling its task) does not affect the others.
    """
    generation = memoization.generation

    ranks = memoization.ranks_by_column.get(column)
    if ranks is not None:
        return ranks

    task = memoization.pending_ranks.get(column)
    if task is None:
        Logger.debug("TallGrid: computing the ranks of column %s" % column)
        task = asyncio.ensure_future(_compute_column_ranks(column, data, memoization, generation))
        task.add_done_callback(functools.partial(_log_failed_ranks, column))
        memoization.pending_ranks[column] = task

    ranks = await asyncio.shield(task)
    check_signal(signal)

    if not memoization.is_current(generation):
        raise AbortError("Data changed while computing the ranks of column %s" % column)
    return ranks


async def fetch_indexes(order_by, data, memoization, signal=None):
    """The permutation for `order_by`: data_indexes[table_index] = index of the row in `data`."""
    validate_order_by(order_by, set(data.header))
    if not order_by:
        return list(range(data.num_rows))

    generation = memoization.generation
    key = serialize_order_by(order_by)

    data_indexes = memoization.indexes_by_order_by.get(key)
    if data_indexes is not None:
        return data_indexes

    all_ranks = await asyncio.gather(*[fetch_ranks(item.column, data, memoization, signal) for item in order_by])
    check_signal(signal)

    if not memoization.is_current(generation):
        raise AbortError("Data changed while computing the sort order")

    data_indexes = compute_data_indexes([
        OrderByWithRanks(item.direction, ranks, column=item.column) for item, ranks in zip(order_by, all_ranks)])
    memoization.indexes_by_order_by[key] = data_indexes
    return data_indexes


async def fetch_table_indexes(order_by, data, memoization, signal=None):
    """The inverse permutation: table_indexes[data_index] = position of the row in the table."""
    data_indexes = await fetch_indexes(order_by, data, memoization, signal=signal)

    key = serialize_order_by(order_by)
    table_indexes = memoization.table_indexes_by_order_by.get(key)
    if table_indexes is None:
        table_indexes = invert_permutation_indexes(data_indexes)
        memoization.table_indexes_by_order_by[key] = table_indexes
    return table_indexes
