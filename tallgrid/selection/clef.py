class SelectionNote(object):
    """The row indexes in the notes are in table order, i.e. as displayed."""
    pass


class ToggleIndex(SelectionNote):
    """Click (or ctrl-click) on a row."""

    def __init__(self, index):
        self.index = index

    def __repr__(self):
        return "ToggleIndex(%s)" % self.index


class ExtendToIndex(SelectionNote):
    """Shift-click on a row."""

    def __init__(self, index):
        self.index = index

    def __repr__(self):
        return "ExtendToIndex(%s)" % self.index


class ToggleAll(SelectionNote):
    def __init__(self, length):
        self.length = length

    def __repr__(self):
        return "ToggleAll(%s)" % self.length


class ClearSelection(SelectionNote):
    def __repr__(self):
        return "ClearSelection()"
