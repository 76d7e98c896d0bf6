class ScrollNote(object):
    pass


class SetScale(ScrollNote):
    """The geometry changed; the scroll position is left as is."""

    def __init__(self, scale):
        self.scale = scale

    def __repr__(self):
        return "SetScale(%s)" % self.scale


class ScrollTo(ScrollNote):
    """A programmatic scroll (e.g. "scroll to row N"); the caller knows the exact target, so it's always global."""

    def __init__(self, scroll_top):
        self.scroll_top = scroll_top

    def __repr__(self):
        return "ScrollTo(%s)" % self.scroll_top


class OnScroll(ScrollNote):
    """The host reports the scrollbar position after a scroll event."""

    def __init__(self, scroll_top):
        self.scroll_top = scroll_top

    def __repr__(self):
        return "OnScroll(%s)" % self.scroll_top


class LocalScroll(ScrollNote):
    def __init__(self, delta, scroll_top=None):
        """`delta` is expressed in virtual px. `scroll_top` is the scrollbar position of the event that triggered the
        local scroll; None if there was no such event (e.g. when nudging a row into view)."""
        self.delta = delta
        self.scroll_top = scroll_top

    def __repr__(self):
        return "LocalScroll(%s, %s)" % (self.delta, self.scroll_top)


class GlobalScroll(ScrollNote):
    def __init__(self, scroll_top):
        self.scroll_top = scroll_top

    def __repr__(self):
        return "GlobalScroll(%s)" % self.scroll_top
