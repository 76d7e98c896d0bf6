"""
Pure functions over scroll positions. Three coordinate systems are involved:

* canvas (scrollbar) positions: what the host reports, between 0 and canvas_height - client_height;
* virtual positions: in the full table, between 0 and virtual_canvas_height - client_height;
* row indexes: 0-based for data rows; the "aria" row index used by get_scroll_note_for_row is 1-based, with the header
  at index 1.

The header is sticky: it is always shown at the top of the viewport, and the data rows scroll underneath it.
"""
import math

from tallgrid.config import get_large_scroll_px, get_max_rendered_rows, get_padding
from tallgrid.constants import ARIA_OFFSET
from tallgrid.errors import DataConsistencyError, InvalidIndexError
from tallgrid.scroll.clef import LocalScroll, ScrollTo


def clamp(value, lower, upper):
    """
    >>> clamp(5, 0, 10), clamp(-5, 0, 10), clamp(15, 0, 10)
    (5, 0, 10)
    """
    return max(lower, min(value, upper))


def clamp_scroll_top(scale, scroll_top):
    """Bounds a scrollbar position to the positions the canvas can actually take."""
    return clamp(scroll_top, 0, scale.max_scroll_top())


def can_be_local_scroll(scale, local_offset, delta, scroll_top, large_scroll_px=None):
    """
    Whether a move by `delta` (ending at scrollbar position `scroll_top`) can be applied as a local scroll, i.e. as an
    offset on top of the current anchor, rather than as a global resynchronisation.

    Shared by the reducer (scroll events) and by get_scroll_note_for_row (bringing a row into view), so that both
    decide alike.

    >>> from tallgrid.scale.construct import create_scale
    >>> scale = create_scale(client_height=1000, header_height=50, row_height=30, num_rows=20000,
    ...                      max_element_height=10000)
    >>> can_be_local_scroll(scale, local_offset=0, delta=100, scroll_top=2000, large_scroll_px=16500)
    True

    Big moves, a big accumulated offset, or reaching either end of the scrollbar force a global scroll:

    >>> can_be_local_scroll(scale, local_offset=0, delta=20000, scroll_top=2000, large_scroll_px=16500)
    False
    >>> can_be_local_scroll(scale, local_offset=16450, delta=100, scroll_top=2000, large_scroll_px=16500)
    False
    >>> can_be_local_scroll(scale, local_offset=0, delta=-100, scroll_top=0, large_scroll_px=16500)
    False
    >>> can_be_local_scroll(scale, local_offset=0, delta=100, scroll_top=9000, large_scroll_px=16500)
    False

    Without virtualization there's nothing to gain from local scrolling:

    >>> small = create_scale(client_height=1000, header_height=50, row_height=30, num_rows=100,
    ...                      max_element_height=10000)
    >>> can_be_local_scroll(small, local_offset=0, delta=100, scroll_top=1000, large_scroll_px=16500)
    False
    """
    if large_scroll_px is None:
        large_scroll_px = get_large_scroll_px()

    if scale is None or delta is None:
        return False

    if scale.factor == 1:
        return False

    if abs(delta) > large_scroll_px:
        return False

    if abs(local_offset + delta) > large_scroll_px:
        return False

    # At either end we need the precision of a global scroll to be able to show the first or last row.
    return 0 < scroll_top < scale.max_scroll_top()


class DerivedValues(object):
    """The rows to show for a scroll position, and where to draw them.

    visible_rows_*: the rows (at least partially) in the viewport; end exclusive.
    rendered_rows_*: the visible rows plus `padding` rows of overscan on each side; end exclusive.
    slice_top: the canvas position of the top of the first rendered row; None if no scrollbar position is known.
    """

    def __init__(self, visible_rows_start, visible_rows_end, rendered_rows_start, rendered_rows_end, slice_top=None):
        self.visible_rows_start = visible_rows_start
        self.visible_rows_end = visible_rows_end
        self.rendered_rows_start = rendered_rows_start
        self.rendered_rows_end = rendered_rows_end
        self.slice_top = slice_top

    def __repr__(self):
        return "DerivedValues(visible=%s:%s, rendered=%s:%s, slice_top=%s)" % (
            self.visible_rows_start, self.visible_rows_end, self.rendered_rows_start, self.rendered_rows_end,
            self.slice_top)

    def __eq__(self, other):
        return isinstance(other, DerivedValues) and self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def as_tuple(self):
        return (self.visible_rows_start, self.visible_rows_end, self.rendered_rows_start, self.rendered_rows_end,
                self.slice_top)


def compute_derived_values(scale, scroll_top, scroll_top_anchor, local_offset, padding=None, max_rendered_rows=None):
    """
    Returns the DerivedValues for a scroll position, or None if it cannot be known yet (no scale or no anchor).

    >>> from tallgrid.scale.construct import create_scale
    >>> scale = create_scale(client_height=1000, header_height=50, row_height=30, num_rows=100,
    ...                      max_element_height=10000)
    >>> compute_derived_values(scale, scroll_top=0, scroll_top_anchor=0, local_offset=0, padding=5)
    DerivedValues(visible=0:32, rendered=0:37, slice_top=0)
    >>> compute_derived_values(scale, scroll_top=None, scroll_top_anchor=None, local_offset=0, padding=5) is None
    True
    """
    if scale is None or scroll_top_anchor is None:
        return None

    if padding is None:
        padding = get_padding()

    if max_rendered_rows is None:
        max_rendered_rows = get_max_rendered_rows()

    virtual_scroll_top = scale.to_virtual(scroll_top_anchor) + local_offset
    client_height = scale.parameters.client_height
    header_height = scale.parameters.header_height
    row_height = scale.parameters.row_height
    num_rows = scale.parameters.num_rows

    # special case: the top of the viewport is (still) in the header
    is_in_header = num_rows == 0 or virtual_scroll_top < header_height

    if is_in_header:
        visible_rows_start = 0
        hidden_pixels_before = virtual_scroll_top
    else:
        visible_rows_start = clamp(math.floor((virtual_scroll_top - header_height) / row_height), 0, num_rows - 1)
        hidden_pixels_before = virtual_scroll_top - header_height - visible_rows_start * row_height

    if num_rows == 0:
        visible_rows_end = 0
    else:
        last_visible_row = math.floor((virtual_scroll_top + client_height - header_height) / row_height)
        visible_rows_end = clamp(last_visible_row, visible_rows_start, num_rows - 1) + 1

    rendered_rows_start = max(0, visible_rows_start - padding)
    rendered_rows_end = min(num_rows, visible_rows_end + padding)

    if rendered_rows_end - rendered_rows_start > max_rendered_rows:
        raise DataConsistencyError(
            "Attempted to render too many rows: %s" % (rendered_rows_end - rendered_rows_start))

    if scroll_top is None:
        return DerivedValues(visible_rows_start, visible_rows_end, rendered_rows_start, rendered_rows_end)

    # The top of the first visible row, in canvas coordinates: the scrollbar position minus its hidden px...
    first_visible_row_top = scroll_top - hidden_pixels_before
    # ... minus the header (once) when we're below it, minus the padding rows rendered above.
    header_rows = 0 if is_in_header else 1
    previous_padding_rows = visible_rows_start - rendered_rows_start
    slice_top = first_visible_row_top - header_rows * header_height - previous_padding_rows * row_height

    return DerivedValues(visible_rows_start, visible_rows_end, rendered_rows_start, rendered_rows_end, slice_top)


def derived_values_for_structure(structure, padding=None, max_rendered_rows=None):
    return compute_derived_values(
        structure.scale, structure.scroll_top, structure.scroll_top_anchor, structure.local_offset,
        padding=padding, max_rendered_rows=max_rendered_rows)


def get_scroll_note_for_row(row_index, scale, scroll_top_anchor, local_offset, large_scroll_px=None):
    """
    Returns the note that brings a row fully into view (LocalScroll or ScrollTo), or None if no scroll is needed.

    `row_index` is the 1-based aria row index: the header is 1, data row r is r + 2. The header, and indexes outside
    the table, are in view by definition.

    >>> from tallgrid.scale.construct import create_scale
    >>> scale = create_scale(client_height=1000, header_height=50, row_height=30, num_rows=100,
    ...                      max_element_height=10000)
    >>> get_scroll_note_for_row(5, scale, scroll_top_anchor=0, local_offset=0) is None
    True
    >>> get_scroll_note_for_row(52, scale, scroll_top_anchor=0, local_offset=0, large_scroll_px=16500)
    ScrollTo(580)
    """
    if not isinstance(row_index, int) or isinstance(row_index, bool):
        raise InvalidIndexError("Invalid row index: %s. It should be an integer." % (row_index,))

    header_height = scale.parameters.header_height
    row_height = scale.parameters.row_height
    num_rows = scale.parameters.num_rows

    if row_index < ARIA_OFFSET or row_index > num_rows + 1:
        return None

    row = row_index - ARIA_OFFSET

    # The data rows scroll underneath the sticky header; the first px they can be seen at is virtual_scroll_top +
    # header_height.
    virtual_scroll_top = scale.to_virtual(scroll_top_anchor) + local_offset
    row_top = header_height + row * row_height
    hidden_pixels_before = virtual_scroll_top + header_height - row_top
    hidden_pixels_after = row_top + row_height - virtual_scroll_top - scale.parameters.client_height

    if hidden_pixels_before <= 0 and hidden_pixels_after <= 0:
        return None

    # snap the hidden edge of the row to the corresponding edge of the viewport
    delta = -hidden_pixels_before if hidden_pixels_before > 0 else hidden_pixels_after
    scroll_top = scale.from_virtual(virtual_scroll_top + delta)

    if can_be_local_scroll(scale, local_offset, delta, scroll_top, large_scroll_px=large_scroll_px):
        return LocalScroll(delta)

    return ScrollTo(scroll_top)
