from tallgrid.dataframe.helpers import validate_get_cell_params, validate_row
from tallgrid.dataframe.structure import ColumnDescriptor, DataFrame, ResolvedValue
from tallgrid.errors import DataConsistencyError, InvalidRowError
from tallgrid.selection.utils import is_valid_index
from tallgrid.sort.structure import validate_order_by


class ArrayDataFrame(DataFrame):
    """
    A static dataframe over a list of dicts (one per row). The rows are not copied; don't mutate them afterwards.

    >>> df = array_dataframe([{"name": "Charlie", "age": 25}, {"name": "Alice", "age": 30}])
    >>> df.num_rows, df.header
    (2, ['name', 'age'])
    >>> df.get_cell(1, "name")
    ResolvedValue('Alice')
    >>> df.fetch is None
    True
    """

    def __init__(self, rows, row_numbers=None, metadata=None, columns_metadata=None):
        names = list(rows[0].keys()) if rows else []

        if columns_metadata is not None and len(columns_metadata) != len(names):
            raise DataConsistencyError("Columns metadata length (%s) does not match the number of columns (%s)" % (
                len(columns_metadata), len(names)))

        if row_numbers is not None:
            if len(row_numbers) != len(rows):
                raise DataConsistencyError("Row numbers length (%s) does not match the number of rows (%s)" % (
                    len(row_numbers), len(rows)))
            # no upper bound: the underlying data may have more rows than this frame
            if not all(is_valid_index(n) for n in row_numbers):
                raise InvalidRowError("Row numbers must be non-negative integers: %s" % (row_numbers,))

        column_descriptors = [
            ColumnDescriptor(name, metadata=None if columns_metadata is None else columns_metadata[i])
            for i, name in enumerate(names)]

        super(ArrayDataFrame, self).__init__(len(rows), column_descriptors, metadata)
        self.rows = rows
        self.row_numbers = row_numbers

    def get_row_number(self, row, order_by=None):
        validate_row(row, self.num_rows)
        validate_order_by(order_by, self.sortable_columns())
        if self.row_numbers is None:
            return ResolvedValue(row)
        return ResolvedValue(self.row_numbers[row])

    def get_cell(self, row, column, order_by=None):
        validate_get_cell_params(row, column, order_by, self)
        cells = self.rows[row]
        if column not in cells:
            raise DataConsistencyError("Column \"%s\" not found in row %s" % (column, row))
        # never pending: the data is static
        return ResolvedValue(cells[column])


def array_dataframe(rows, row_numbers=None, metadata=None, columns_metadata=None):
    return ArrayDataFrame(rows, row_numbers=row_numbers, metadata=metadata, columns_metadata=columns_metadata)
