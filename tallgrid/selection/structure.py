class Range(object):
    """Half-open range of row indexes [start, end); see tallgrid.selection.utils for what makes a Range valid."""

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def __repr__(self):
        return "Range(%s, %s)" % (self.start, self.end)

    def __eq__(self, other):
        return isinstance(other, Range) and self.start == other.start and self.end == other.end

    def __hash__(self):
        return hash((self.start, self.end))

    def __len__(self):
        return self.end - self.start

    def __contains__(self, index):
        return self.start <= index < self.end

    def to_json(self):
        return {"start": self.start, "end": self.end}

    @staticmethod
    def from_json(obj):
        return Range(obj["start"], obj["end"])


class Selection(object):
    def __init__(self, ranges, anchor=None):
        """
        ranges: list of Range in canonical form (sorted, non-overlapping, separated).
        anchor: row index used as the pivot for extensions; it need not be selected itself. May be None.
        """
        self.ranges = ranges
        self.anchor = anchor

    def __repr__(self):
        return "Selection(%s, anchor=%s)" % (self.ranges, self.anchor)

    def __eq__(self, other):
        return isinstance(other, Selection) and self.ranges == other.ranges and self.anchor == other.anchor

    def __hash__(self):
        return hash((tuple(self.ranges), self.anchor))

    @staticmethod
    def empty():
        return Selection([], None)

    def to_json(self):
        """
        The JSON-compatible shape a host may persist; from_json(to_json()) gives back an equal Selection.

        >>> Selection([Range(0, 2)], anchor=1).to_json()
        {'ranges': [{'start': 0, 'end': 2}], 'anchor': 1}
        >>> Selection([]).to_json()
        {'ranges': []}
        """
        result = {"ranges": [r.to_json() for r in self.ranges]}
        if self.anchor is not None:
            result["anchor"] = self.anchor
        return result

    @staticmethod
    def from_json(obj):
        return Selection([Range.from_json(r) for r in obj["ranges"]], obj.get("anchor"))
