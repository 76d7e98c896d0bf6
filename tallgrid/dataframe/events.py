class DataFrameEvent(object):
    pass


class Resolve(DataFrameEvent):
    """Some data became available synchronously (through get_cell / get_row_number)."""

    def __repr__(self):
        return "Resolve()"


class Update(DataFrameEvent):
    """Some data changed; anything derived from it (ranks, permutations) is stale."""

    def __repr__(self):
        return "Update()"


class NumRowsChange(DataFrameEvent):
    def __init__(self, num_rows):
        self.num_rows = num_rows

    def __repr__(self):
        return "NumRowsChange(%s)" % self.num_rows
