from tallgrid.errors import DataConsistencyError
from tallgrid.selection.clef import ClearSelection, ExtendToIndex, ToggleAll, ToggleIndex
from tallgrid.selection.convert import extend_in_view, toggle_index_in_selection, toggle_range_in_selection
from tallgrid.selection.structure import Selection
from tallgrid.selection.utils import check_index, toggle_all


def _to_data_index(index, data_indexes):
    check_index(index)
    if data_indexes is None:
        return index
    if index >= len(data_indexes):
        raise DataConsistencyError("Invalid table index: %s, the permutation has %s rows" % (index, len(data_indexes)))
    return data_indexes[index]


def play_selection_note(note, selection, data_indexes=None):
    """
    :: note, selection => selection

    `selection` is in data order. `data_indexes` is the permutation of the displayed rows (None: not sorted); the
    indexes in the notes are positions in that display.
    """

    if isinstance(note, ToggleIndex):
        return toggle_index_in_selection(selection, _to_data_index(note.index, data_indexes))

    elif isinstance(note, ExtendToIndex):
        if data_indexes is None:
            return toggle_range_in_selection(selection, note.index)
        return extend_in_view(selection, note.index, data_indexes)

    elif isinstance(note, ToggleAll):
        # the full range is the same in any order
        return Selection(toggle_all(selection.ranges, note.length), selection.anchor)

    elif isinstance(note, ClearSelection):
        return Selection.empty()

    raise Exception("Illegal note (programming error): %s" % note)
