class ScrollStructure(object):
    def __init__(self, scale, scroll_top, scroll_top_anchor, local_offset, is_scrolling=False):
        """
        scale: the current Scale, or None if the geometry is not known yet.
        scroll_top: the last scrollbar position reported (canvas space), or None.
        scroll_top_anchor: the scrollbar position last used as the basis of a global computation, or None.
        local_offset: virtual px added on top of the anchor by local scrolls.
        is_scrolling: True between a programmatic ScrollTo and the scroll event it provokes.
        """
        self.scale = scale
        self.scroll_top = scroll_top
        self.scroll_top_anchor = scroll_top_anchor
        self.local_offset = local_offset
        self.is_scrolling = is_scrolling

    def __repr__(self):
        return "ScrollStructure(%s, %s, %s, %s, %s)" % (
            self.scale, self.scroll_top, self.scroll_top_anchor, self.local_offset, self.is_scrolling)

    @staticmethod
    def initial():
        return ScrollStructure(scale=None, scroll_top=None, scroll_top_anchor=None, local_offset=0)

    def virtual_scroll_top(self):
        """The virtual position of the top of the viewport; None while it cannot be known."""
        if self.scale is None or self.scroll_top_anchor is None:
            return None
        return self.scale.to_virtual(self.scroll_top_anchor) + self.local_offset


def update_scroll_structure(structure, **kwargs):
    values = {
        'scale': structure.scale,
        'scroll_top': structure.scroll_top,
        'scroll_top_anchor': structure.scroll_top_anchor,
        'local_offset': structure.local_offset,
        'is_scrolling': structure.is_scrolling,
    }
    values.update(kwargs)
    return ScrollStructure(**values)
