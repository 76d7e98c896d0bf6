from kivy.logger import Logger

from tallgrid.scroll.clef import (
    GlobalScroll,
    LocalScroll,
    OnScroll,
    ScrollTo,
    SetScale,
)
from tallgrid.scroll.structure import update_scroll_structure
from tallgrid.scroll.utils import can_be_local_scroll, clamp_scroll_top


def global_scroll(structure, scroll_top):
    """The resynchronisation point: the scrollbar position becomes the (bounded) anchor, the local offset is reset."""
    if structure.scale is None:
        # without a scale there are no bounds to respect
        anchor = scroll_top
    else:
        anchor = clamp_scroll_top(structure.scale, scroll_top)

    Logger.debug("TallGrid: global scroll to %s (anchor %s)" % (scroll_top, anchor))

    return update_scroll_structure(
        structure,
        scroll_top=scroll_top,
        scroll_top_anchor=anchor,
        local_offset=0,
    )


def local_scroll(structure, delta, scroll_top=None):
    """Moves by `delta` virtual px on top of the unchanged anchor."""
    return update_scroll_structure(
        structure,
        scroll_top=structure.scroll_top if scroll_top is None else scroll_top,
        local_offset=structure.local_offset + delta,
    )


def on_scroll(structure, scroll_top, large_scroll_px=None):
    previous_scroll_top = structure.scroll_top

    if previous_scroll_top is None or structure.scroll_top_anchor is None:
        # nothing to compute a delta against (or to add it to)
        delta = None
    else:
        delta = scroll_top - previous_scroll_top

    if can_be_local_scroll(structure.scale, structure.local_offset, delta, scroll_top,
                           large_scroll_px=large_scroll_px):
        return local_scroll(structure, delta, scroll_top)

    return global_scroll(structure, scroll_top)


def play_scroll_note(note, structure, large_scroll_px=None):
    """:: note, structure => structure

    `large_scroll_px` overrides the configured threshold above which a scroll is never local.
    """
    if isinstance(note, SetScale):
        # TODO: when the row count changes a lot, keep the same rows in view instead of the same scrollbar position
        return update_scroll_structure(structure, scale=note.scale)

    elif isinstance(note, ScrollTo):
        return update_scroll_structure(global_scroll(structure, note.scroll_top), is_scrolling=True)

    elif isinstance(note, OnScroll):
        return update_scroll_structure(
            on_scroll(structure, note.scroll_top, large_scroll_px=large_scroll_px), is_scrolling=False)

    elif isinstance(note, LocalScroll):
        return local_scroll(structure, note.delta, note.scroll_top)

    elif isinstance(note, GlobalScroll):
        return global_scroll(structure, note.scroll_top)

    raise Exception("Illegal note (programming error): %s" % note)
