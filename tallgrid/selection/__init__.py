"""
The dsn 'selection' models a row selection as a sorted list of disjoint, separated, half-open ranges, plus an anchor:
the row used as the pivot for shift-click extensions.

Selections are always stored in data order (the order of the rows in the underlying data source). When the table is
sorted, gestures happen in display order; tallgrid.selection.convert moves selections between the two.
"""
