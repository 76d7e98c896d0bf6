"""
Operations on Ranges, i.e. lists of Range in canonical form:

* every range is valid: start and end are non-negative integers, and end > start (no empty ranges);
* the ranges are sorted and separated: the end of a range is strictly less than the start of the next one. Touching
  ranges ([0, 2) and [2, 4)) are not canonical; they must be merged ([0, 4)).

All operations validate their input before doing anything, and return new lists; their inputs are left untouched.
"""
from tallgrid.errors import InvalidIndexError, InvalidRangeError, InvalidRangesError
from tallgrid.selection.structure import Range


def is_valid_index(index):
    """
    >>> is_valid_index(0), is_valid_index(-1), is_valid_index(1.5), is_valid_index(True)
    (True, False, False, False)
    """
    return isinstance(index, int) and not isinstance(index, bool) and index >= 0


def is_valid_range(range_):
    return isinstance(range_, Range) and is_valid_index(range_.start) and is_valid_index(range_.end) and \
        range_.end > range_.start


def are_valid_ranges(ranges):
    """
    >>> are_valid_ranges([Range(0, 2), Range(3, 4)])
    True
    >>> are_valid_ranges([Range(0, 2), Range(2, 4)])
    False
    >>> are_valid_ranges([Range(3, 4), Range(0, 2)])
    False
    """
    if not all(is_valid_range(r) for r in ranges):
        return False

    return all(previous.end < current.start for previous, current in zip(ranges, ranges[1:]))


def check_index(index, name="index"):
    if not is_valid_index(index):
        raise InvalidIndexError("Invalid %s: %s" % (name, index))


def check_range(range_):
    if not is_valid_range(range_):
        raise InvalidRangeError("Invalid range: %s" % (range_,))


def check_ranges(ranges):
    if not are_valid_ranges(ranges):
        raise InvalidRangesError("Invalid ranges: %s" % (ranges,))


def check_length(length):
    if not is_valid_index(length):
        raise InvalidIndexError("Invalid length: %s" % (length,))


def is_selected(ranges, index):
    check_ranges(ranges)
    check_index(index)
    return any(index in r for r in ranges)


def are_all_selected(ranges, length):
    """
    >>> are_all_selected([Range(0, 3)], 3), are_all_selected([Range(0, 2)], 3), are_all_selected([], 0)
    (True, False, True)
    """
    check_ranges(ranges)
    check_length(length)

    if length == 0:
        return ranges == []

    return len(ranges) == 1 and ranges[0].start == 0 and ranges[0].end == length


def count_selected_rows(ranges):
    check_ranges(ranges)
    return sum(len(r) for r in ranges)


def toggle_all(ranges, length):
    """
    Selects every row in [0, length), unless they are all selected already, in which case nothing is selected.

    >>> toggle_all([Range(0, 3)], 3)
    []
    >>> toggle_all([], 3)
    [Range(0, 3)]
    >>> toggle_all([Range(0, 1)], 3)
    [Range(0, 3)]
    """
    check_ranges(ranges)
    check_length(length)

    if length == 0 or are_all_selected(ranges, length):
        return []

    return [Range(0, length)]


def select_range(ranges, range_):
    """
    Adds a range, merging it with the ranges it overlaps or touches.

    >>> select_range([Range(0, 2), Range(5, 6), Range(9, 10)], Range(2, 5))
    [Range(0, 6), Range(9, 10)]
    >>> select_range([Range(0, 2)], Range(4, 5))
    [Range(0, 2), Range(4, 5)]
    """
    check_ranges(ranges)
    check_range(range_)

    start, end = range_.start, range_.end
    result = []
    i = 0

    # the ranges entirely before the new one (not even touching it)
    while i < len(ranges) and ranges[i].end < start:
        result.append(ranges[i])
        i += 1

    # the ranges overlapping or touching the new one are merged into it
    while i < len(ranges) and ranges[i].start <= end:
        start = min(start, ranges[i].start)
        end = max(end, ranges[i].end)
        i += 1

    result.append(Range(start, end))

    return result + ranges[i:]


def unselect_range(ranges, range_):
    """
    Removes a range; the ranges that only partially overlap it are cut.

    >>> unselect_range([Range(0, 10)], Range(3, 5))
    [Range(0, 3), Range(5, 10)]
    >>> unselect_range([Range(0, 2), Range(4, 6), Range(8, 10)], Range(1, 9))
    [Range(0, 1), Range(9, 10)]
    """
    check_ranges(ranges)
    check_range(range_)

    start, end = range_.start, range_.end
    result = []
    i = 0

    while i < len(ranges) and ranges[i].end <= start:
        result.append(ranges[i])
        i += 1

    while i < len(ranges) and ranges[i].start < end:
        current = ranges[i]
        if current.start < start:
            result.append(Range(current.start, start))
        if current.end > end:
            result.append(Range(end, current.end))
        i += 1

    return result + ranges[i:]


def select_index(ranges, index):
    check_index(index)
    return select_range(ranges, Range(index, index + 1))


def unselect_index(ranges, index):
    check_index(index)
    return unselect_range(ranges, Range(index, index + 1))


def toggle_index(ranges, index):
    """
    >>> toggle_index([Range(0, 3)], 1)
    [Range(0, 1), Range(2, 3)]
    >>> toggle_index(toggle_index([Range(0, 3)], 1), 1)
    [Range(0, 3)]
    """
    if is_selected(ranges, index):
        return unselect_index(ranges, index)
    return select_index(ranges, index)


def toggle_all_indices(ranges, indices):
    """
    Like toggle_all, but restricted to some indices (e.g. the rows that pass a filter): if they are all selected, the
    selection is cleared; otherwise they are all added to it.

    >>> toggle_all_indices([], [1, 2, 4])
    [Range(1, 3), Range(4, 5)]
    >>> toggle_all_indices([Range(1, 3), Range(4, 5)], [1, 2, 4])
    []
    """
    check_ranges(ranges)
    for index in indices:
        check_index(index)

    if all(is_selected(ranges, index) for index in indices):
        return []

    result = ranges
    for index in indices:
        result = select_index(result, index)
    return result


def extend_from_anchor(ranges, anchor, index):
    """
    The shift-click: the rows from the anchor to the index (both inclusive) take the selection state of the anchor.
    I.e. if the anchor is selected the range is selected, otherwise it's unselected.

    >>> extend_from_anchor([Range(0, 1)], 0, 1)
    [Range(0, 2)]
    >>> extend_from_anchor([Range(0, 1)], 2, 3)
    [Range(0, 1)]
    >>> extend_from_anchor([Range(0, 10)], 2, 5)
    [Range(0, 10)]
    >>> extend_from_anchor([Range(0, 3), Range(5, 10)], 4, 7)
    [Range(0, 3), Range(8, 10)]

    Without an anchor there is nothing to extend from; on the anchor itself the click toggles it:

    >>> extend_from_anchor([Range(0, 1)], None, 3)
    [Range(0, 1)]
    >>> extend_from_anchor([Range(0, 1)], 0, 0)
    []
    """
    check_ranges(ranges)
    check_index(index)

    if anchor is None:
        return list(ranges)

    check_index(anchor, "anchor")

    if anchor == index:
        return toggle_index(ranges, index)

    range_ = Range(min(anchor, index), max(anchor, index) + 1)

    if is_selected(ranges, anchor):
        return select_range(ranges, range_)
    return unselect_range(ranges, range_)


def ranges_from_indexes(indexes):
    """
    Canonical ranges covering a collection of (valid) indexes, in any order, possibly with duplicates.

    >>> ranges_from_indexes([5, 1, 2, 3, 7, 6])
    [Range(1, 4), Range(5, 8)]
    >>> ranges_from_indexes([])
    []
    """
    result = []
    for index in sorted(set(indexes)):
        if result and result[-1].end == index:
            result[-1] = Range(result[-1].start, index + 1)
        else:
            result.append(Range(index, index + 1))
    return result


def iter_selected_indexes(ranges):
    for r in ranges:
        for index in range(r.start, r.end):
            yield index
