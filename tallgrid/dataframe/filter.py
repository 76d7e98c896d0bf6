from tallgrid.cancel import check_signal
from tallgrid.dataframe.events import Resolve
from tallgrid.dataframe.helpers import validate_fetch_params, validate_get_cell_params, validate_row
from tallgrid.dataframe.structure import ColumnDescriptor, DataFrame
from tallgrid.selection.utils import ranges_from_indexes
from tallgrid.sort.structure import validate_order_by


class FilteredDataFrame(DataFrame):
    """
    The rows of `data` for which predicate(row) is true, where `row` is the index of the row in `data`. The predicate is
    evaluated once, at construction, so it can only look at data that is available synchronously.

    The result is not sortable; to sort a filtered frame, wrap it with sortable_dataframe.

    >>> from tallgrid.dataframe.array import array_dataframe
    >>> data = array_dataframe([{"n": 0}, {"n": 1}, {"n": 2}, {"n": 3}])
    >>> odd = filter_dataframe(data, lambda row: data.get_cell(row, "n").value % 2 == 1)
    >>> odd.num_rows
    2
    >>> odd.get_cell(1, "n"), odd.get_row_number(1)
    (ResolvedValue(3), ResolvedValue(3))
    """

    def __init__(self, data, predicate):
        column_descriptors = [ColumnDescriptor(c.name, metadata=c.metadata) for c in data.column_descriptors]
        upstream_rows = [row for row in range(data.num_rows) if predicate(row)]

        super(FilteredDataFrame, self).__init__(len(upstream_rows), column_descriptors, data.metadata)
        self.upstream = data
        self.upstream_rows = upstream_rows

        if data.fetch is None:
            # a static upstream gives a static result
            self.fetch = None

    def get_upstream_row(self, row):
        validate_row(row, self.num_rows)
        return self.upstream_rows[row]

    def get_row_number(self, row, order_by=None):
        validate_order_by(order_by, self.sortable_columns())
        return self.upstream.get_row_number(self.get_upstream_row(row))

    def get_cell(self, row, column, order_by=None):
        validate_get_cell_params(row, column, order_by, self)
        return self.upstream.get_cell(self.get_upstream_row(row), column)

    async def fetch(self, row_start, row_end, columns=None, order_by=None, signal=None):
        validate_fetch_params(row_start, row_end, columns, order_by, self)
        check_signal(signal)

        # the upstream frame announces its own progress; relay it
        disconnect = self.upstream.channel.connect(self._relay_resolve)
        try:
            for range_ in ranges_from_indexes(self.upstream_rows[row_start:row_end]):
                await self.upstream.fetch(range_.start, range_.end, columns=columns, signal=signal)
                check_signal(signal)
        finally:
            disconnect()

    def _relay_resolve(self, event):
        if isinstance(event, Resolve):
            self.channel.broadcast(event)


def filter_dataframe(data, predicate):
    return FilteredDataFrame(data, predicate)
