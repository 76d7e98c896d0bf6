from tallgrid.config import get_max_element_height
from tallgrid.errors import ConfigurationError
from tallgrid.scale.structure import Scale, ScaleParameters


def _is_non_negative_integer(n):
    return isinstance(n, int) and not isinstance(n, bool) and n >= 0


def create_scale(client_height, header_height, row_height, num_rows, max_element_height=None):
    """
    `max_element_height` defaults to the configured cap on the height of a single element of the render surface.

    >>> scale = create_scale(client_height=1000, header_height=50, row_height=30, num_rows=100,
    ...                      max_element_height=10000)
    >>> scale.factor, scale.canvas_height, scale.to_virtual(123)
    (1, 3050, 123)

    >>> scale = create_scale(client_height=1000, header_height=50, row_height=30, num_rows=20000,
    ...                      max_element_height=10000)
    >>> scale.canvas_height, scale.virtual_canvas_height
    (10000, 600050)
    >>> round(scale.to_virtual(scale.max_scroll_top())) == scale.virtual_canvas_height - 1000
    True

    >>> create_scale(client_height=1000, header_height=50, row_height=30, num_rows=100, max_element_height=1000)
    Traceback (most recent call last):
    ...
    tallgrid.errors.ConfigurationError: Invalid maxElementHeight: 1000 when clientHeight is 1000. maxElementHeight should be greater than clientHeight.
    """
    if max_element_height is None:
        max_element_height = get_max_element_height()

    if header_height <= 0:
        raise ConfigurationError("Invalid headerHeight: %s. It should be a positive number." % header_height)

    if row_height <= 0:
        raise ConfigurationError("Invalid rowHeight: %s. It should be a positive number." % row_height)

    if not _is_non_negative_integer(num_rows):
        raise ConfigurationError("Invalid numRows: %s. It should be a non-negative integer." % num_rows)

    if max_element_height <= 0:
        raise ConfigurationError("Invalid maxElementHeight: %s. It should be a positive number." % max_element_height)

    if max_element_height <= client_height:
        raise ConfigurationError(
            "Invalid maxElementHeight: %s when clientHeight is %s. maxElementHeight should be greater than "
            "clientHeight." % (max_element_height, client_height))

    parameters = ScaleParameters(client_height, header_height, row_height, num_rows, max_element_height)

    # The height of the full table; it can exceed what a render surface can address.
    virtual_canvas_height = header_height + num_rows * row_height

    if virtual_canvas_height <= max_element_height:
        return Scale(parameters, factor=1, canvas_height=virtual_canvas_height,
                     virtual_canvas_height=virtual_canvas_height)

    canvas_height = max_element_height

    # canvas_height > client_height (checked above), so the denominator is positive, and the factor is > 1.
    factor = (virtual_canvas_height - client_height) / (canvas_height - client_height)

    return Scale(parameters, factor=factor, canvas_height=canvas_height, virtual_canvas_height=virtual_canvas_height)
