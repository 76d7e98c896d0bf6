from tallgrid.errors import InvalidColumnError, InvalidRowError
from tallgrid.selection.utils import is_valid_index
from tallgrid.sort.structure import validate_order_by


def validate_row(row, num_rows):
    if not is_valid_index(row) or row >= num_rows:
        raise InvalidRowError("Invalid row index: %s, numRows: %s" % (row, num_rows))


def validate_column(column, header):
    if column not in header:
        raise InvalidColumnError("Invalid column: %s. Available columns: %s" % (column, ", ".join(header)))


def validate_get_cell_params(row, column, order_by, data):
    validate_column(column, data.header)
    validate_row(row, data.num_rows)
    validate_order_by(order_by, data.sortable_columns())


def validate_fetch_params(row_start, row_end, columns, order_by, data):
    """The range may be empty (row_start == row_end); it must be inside [0, num_rows]."""
    if not is_valid_index(row_start) or not is_valid_index(row_end) or row_start > row_end or \
            row_end > data.num_rows:
        raise InvalidRowError("Invalid row range: %s - %s, numRows: %s" % (row_start, row_end, data.num_rows))

    header = data.header
    for column in columns or []:
        validate_column(column, header)

    validate_order_by(order_by, data.sortable_columns())
