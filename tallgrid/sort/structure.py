import json

from tallgrid.errors import InvalidColumnError, InvalidOrderByError

ASCENDING = "ascending"
DESCENDING = "descending"

DIRECTIONS = (ASCENDING, DESCENDING)


class ColumnOrderBy(object):
    def __init__(self, column, direction=ASCENDING):
        self.column = column
        self.direction = direction

    def __repr__(self):
        return "ColumnOrderBy(%r, %r)" % (self.column, self.direction)

    def __eq__(self, other):
        return isinstance(other, ColumnOrderBy) and self.column == other.column and self.direction == other.direction

    def __hash__(self):
        return hash((self.column, self.direction))

    def to_json(self):
        return {"column": self.column, "direction": self.direction}


def validate_order_by(order_by, sortable_columns):
    """
    An order_by (a list of ColumnOrderBy, or None) is valid if it only refers to sortable columns, each at most once.
    """
    if not order_by:
        return

    seen = set()
    for item in order_by:
        if not isinstance(item, ColumnOrderBy) or item.direction not in DIRECTIONS:
            raise InvalidOrderByError("Invalid orderBy item: %s" % (item,))

        if item.column not in sortable_columns:
            raise InvalidColumnError("Invalid column: %s. It is not sortable." % item.column)

        if item.column in seen:
            raise InvalidOrderByError("Invalid orderBy: column %s appears more than once" % item.column)
        seen.add(item.column)


def serialize_order_by(order_by):
    """
    A key for caches.

    >>> serialize_order_by([ColumnOrderBy("name", DESCENDING)])
    '[{"column": "name", "direction": "descending"}]'
    """
    return json.dumps([item.to_json() for item in (order_by or [])])


def are_equal_order_by(a, b):
    """None and [] are both "no sort"."""
    return list(a or []) == list(b or [])


def partition_order_by(order_by, column):
    """Returns (prefix, item, suffix): the sort keys before `column`, its own (or None), and those after it."""
    for index, item in enumerate(order_by):
        if item.column == column:
            return order_by[:index], item, order_by[index + 1:]
    return list(order_by), None, []


def toggle_column(column, order_by, exclusive=False):
    """
    What clicking a column header does to the order_by.

    The principal column cycles through ascending, descending and unsorted:

    >>> toggle_column("a", [])
    [ColumnOrderBy('a', 'ascending')]
    >>> toggle_column("a", [ColumnOrderBy("a", ASCENDING), ColumnOrderBy("b", ASCENDING)])
    [ColumnOrderBy('a', 'descending'), ColumnOrderBy('b', 'ascending')]
    >>> toggle_column("a", [ColumnOrderBy("a", DESCENDING), ColumnOrderBy("b", ASCENDING)])
    [ColumnOrderBy('b', 'ascending')]

    Any other column becomes the principal one, in ascending order:

    >>> toggle_column("b", [ColumnOrderBy("a", DESCENDING), ColumnOrderBy("b", DESCENDING)])
    [ColumnOrderBy('b', 'ascending'), ColumnOrderBy('a', 'descending')]

    With exclusive sorting, only one column is sorted at a time:

    >>> toggle_column("b", [ColumnOrderBy("a", DESCENDING)], exclusive=True)
    [ColumnOrderBy('b', 'ascending')]
    """
    prefix, item, suffix = partition_order_by(order_by or [], column)

    if item is not None and not prefix:
        if item.direction == ASCENDING:
            result = [ColumnOrderBy(column, DESCENDING)] + suffix
        else:
            result = list(suffix)
    else:
        result = [ColumnOrderBy(column, ASCENDING)] + prefix + suffix

    if exclusive:
        return [i for i in result if i.column == column]
    return result
