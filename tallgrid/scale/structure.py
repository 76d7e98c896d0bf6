class ScaleParameters(object):
    def __init__(self, client_height, header_height, row_height, num_rows, max_element_height):
        self.client_height = client_height
        self.header_height = header_height
        self.row_height = row_height
        self.num_rows = num_rows
        self.max_element_height = max_element_height

    def __repr__(self):
        return "ScaleParameters(%s, %s, %s, %s, %s)" % (
            self.client_height, self.header_height, self.row_height, self.num_rows, self.max_element_height)

    def __eq__(self, other):
        return isinstance(other, ScaleParameters) and self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def as_tuple(self):
        return (self.client_height, self.header_height, self.row_height, self.num_rows, self.max_element_height)


class Scale(object):
    """
    The mapping between the scrollbar (canvas) coordinates and the virtual coordinates of the full table.

    The linear maps are defined so that the bottoms coincide once the client height is taken off: scrolling the
    canvas to its very end shows the very end of the table.

    Use create_scale() rather than instantiating directly; it validates the parameters.
    """

    def __init__(self, parameters, factor, canvas_height, virtual_canvas_height):
        self.parameters = parameters
        self.factor = factor
        self.canvas_height = canvas_height
        self.virtual_canvas_height = virtual_canvas_height

    def __repr__(self):
        return "Scale(factor=%s, canvas_height=%s, virtual_canvas_height=%s)" % (
            self.factor, self.canvas_height, self.virtual_canvas_height)

    def to_virtual(self, scroll_top):
        if self.factor == 1:
            return scroll_top
        return scroll_top * self.factor

    def from_virtual(self, virtual_scroll_top):
        if self.factor == 1:
            return virtual_scroll_top
        return virtual_scroll_top / self.factor

    def max_scroll_top(self):
        """The largest scrollbar position; the canvas can't be scrolled further down."""
        return self.canvas_height - self.parameters.client_height
