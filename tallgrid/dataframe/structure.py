from tallgrid.channel import Channel
from tallgrid.dataframe.events import NumRowsChange


class ResolvedValue(object):
    """A boxed cell value, so that a resolved None can be told apart from a pending cell (which is just None)."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return "ResolvedValue(%r)" % (self.value,)

    def __eq__(self, other):
        return isinstance(other, ResolvedValue) and self.value == other.value

    def __hash__(self):
        return hash(self.value)


class ColumnDescriptor(object):
    def __init__(self, name, sortable=False, metadata=None):
        self.name = name
        self.sortable = sortable
        self.metadata = metadata

    def __repr__(self):
        return "ColumnDescriptor(%r, sortable=%s)" % (self.name, self.sortable)


class DataFrame(object):
    """
    Base class of the data sources. Subclasses implement get_cell and get_row_number, and, unless their data is
    static, an async method:

        async def fetch(self, row_start, row_end, columns=None, order_by=None, signal=None)

    which loads the cells of the rows [row_start, row_end) for the given columns (in the order given by order_by),
    broadcasts Resolve when new data is available, and raises AbortError once `signal` (a CancelToken) is cancelled.
    It does not return the data; read it with get_cell.

    Methods that take an `order_by` must respect the `sortable` property of the columns: sort along sortable columns,
    and raise for any other column.
    """

    fetch = None
    exclusive_sort = False  # True: only one column can be sorted at a time

    def __init__(self, num_rows, column_descriptors, metadata=None):
        self._num_rows = num_rows
        self.column_descriptors = column_descriptors
        self.metadata = metadata
        self.channel = Channel()

    def __repr__(self):
        return "%s(%s rows, %s)" % (type(self).__name__, self.num_rows, self.header)

    @property
    def num_rows(self):
        return self._num_rows

    @num_rows.setter
    def num_rows(self, value):
        if value == self._num_rows:
            return
        self._num_rows = value
        self.channel.broadcast(NumRowsChange(value))

    @property
    def header(self):
        return [c.name for c in self.column_descriptors]

    def sortable_columns(self):
        return set(c.name for c in self.column_descriptors if c.sortable)

    def get_cell(self, row, column, order_by=None):
        """Returns a ResolvedValue, or None if the cell is pending. Never initiates a fetch."""
        raise NotImplementedError()

    def get_row_number(self, row, order_by=None):
        """Returns the index of the row in the underlying data (as a ResolvedValue), or None if not known yet."""
        raise NotImplementedError()
