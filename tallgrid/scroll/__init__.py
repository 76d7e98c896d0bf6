"""
The dsn 'scroll' keeps track of where a virtually scrolled table is, given the raw scrollbar events of the host.

The scrollbar lives in canvas space, which may be compressed with respect to the virtual space of the table (see
tallgrid.scale). Naively mapping every scrollbar position through the scale has an unpleasant consequence: a single
wheel step of 100px might move the table by thousands of px, i.e. skip hundreds of rows. So we distinguish two modes
of scrolling:

* global: the scrollbar position is the truth. We take it as the anchor, and map it through the scale.
* local: the scroll was small. We keep the anchor, and add the (uncompressed) delta to a local offset; the table moves
  by exactly as many px as the user scrolled.

At any moment the virtual position of the top of the viewport is `scale.to_virtual(anchor) + local_offset`.

Big moves (dragging the scrollbar), an accumulated local offset that grew big, and reaching either end of the
scrollbar all resynchronise globally: at the ends, because only a global scroll guarantees that the first (or last) row
can actually be reached.
"""
