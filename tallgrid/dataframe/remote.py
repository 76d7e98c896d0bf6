from kivy.logger import Logger

from tallgrid.cancel import check_signal
from tallgrid.dataframe.events import Resolve, Update
from tallgrid.dataframe.helpers import validate_fetch_params, validate_get_cell_params, validate_row
from tallgrid.dataframe.structure import ColumnDescriptor, DataFrame, ResolvedValue
from tallgrid.errors import AbortError, DataConsistencyError
from tallgrid.selection.utils import ranges_from_indexes
from tallgrid.sort.structure import validate_order_by


class RemoteDataFrame(DataFrame):
    """
    A dataframe whose rows are loaded on demand, by an async callable

        load_rows(row_start, row_end, columns) -> list of dicts, one per row of [row_start, row_end)

    e.g. a request to a server, or a read in a large file. Loaded cells are kept until clear() is called; only the
    missing ones are requested. The columns are not sortable; wrap the frame with sortable_dataframe for that.

    Every change of the data (clear(), or a new num_rows) starts a new generation; rows that were requested in an
    earlier generation are not stored, and the fetch that requested them raises AbortError.
    """

    def __init__(self, num_rows, header, load_rows, metadata=None):
        super(RemoteDataFrame, self).__init__(num_rows, [ColumnDescriptor(name) for name in header], metadata)
        self.load_rows = load_rows
        self.cells = {name: {} for name in header}
        self.generation = 0

    @DataFrame.num_rows.setter
    def num_rows(self, value):
        if value != self._num_rows:
            self.generation += 1
        DataFrame.num_rows.fset(self, value)

    def get_row_number(self, row, order_by=None):
        validate_row(row, self.num_rows)
        validate_order_by(order_by, self.sortable_columns())
        return ResolvedValue(row)

    def get_cell(self, row, column, order_by=None):
        validate_get_cell_params(row, column, order_by, self)
        return self.cells[column].get(row)

    async def fetch(self, row_start, row_end, columns=None, order_by=None, signal=None):
        validate_fetch_params(row_start, row_end, columns, order_by, self)
        check_signal(signal)

        if not columns:
            # row numbers are always available
            return

        generation = self.generation
        missing = [row for row in range(row_start, row_end) if any(row not in self.cells[c] for c in columns)]

        for range_ in ranges_from_indexes(missing):
            rows = await self.load_rows(range_.start, range_.end, columns)
            check_signal(signal)

            if self.generation != generation:
                Logger.debug("TallGrid: dropping the rows %s, the remote data changed meanwhile" % range_)
                raise AbortError("Data changed while loading %s" % range_)

            if len(rows) != len(range_):
                raise DataConsistencyError("Expected %s rows for %s, got %s" % (len(range_), range_, len(rows)))

            for row, values in zip(range(range_.start, range_.end), rows):
                for column in columns:
                    if column not in values:
                        raise DataConsistencyError("Column \"%s\" not found in row %s" % (column, row))
                    self.cells[column][row] = ResolvedValue(values[column])

            self.channel.broadcast(Resolve())

    def clear(self):
        """Drop the loaded cells, e.g. because the remote data changed."""
        Logger.info("TallGrid: remote data changed, dropping %s loaded columns" % len(self.cells))
        self.generation += 1
        self.cells = {name: {} for name in self.header}
        self.channel.broadcast(Update())
