"""
Notes about caching ranks and permutations.

Computing the permutation for an order_by means reading a full column for each of its sort keys, which, for a remote
data source, is by far the most expensive thing this package does. Both steps are cached:

* ranks per column (a column's ranks don't depend on the direction it's sorted in, nor on the other sort keys), and
* data indexes (and their inverse, table indexes) per serialized order_by.

Cache invalidation is deliberately coarse: any "data changed" notification from the data source drops everything.
There is no fine-grained invalidation and no replacement policy (we keep what we computed until the data changes).

Because the computations are asynchronous, two more things are tracked:

* `pending_ranks`: the in-flight computation per column, so that concurrent callers share one computation instead of
  each fetching the column again;
* `generation`: bumped on every clear(). A computation notes the generation it started in, and only commits its
  result if the generation is unchanged when it finishes; otherwise the result was computed on stale data.
"""


class Memoization(object):
    """Single point of access for the rank and permutation caches of one sortable dataframe"""

    def __init__(self):
        self.ranks_by_column = {}
        self.indexes_by_order_by = {}
        self.table_indexes_by_order_by = {}
        self.pending_ranks = {}
        self.generation = 0

    def __repr__(self):
        return "Memoization(generation=%s, columns=%s, order_bys=%s, inverse_order_bys=%s)" % (
            self.generation, sorted(self.ranks_by_column), sorted(self.indexes_by_order_by),
            sorted(self.table_indexes_by_order_by))

    def clear(self):
        # in-flight computations are not cancelled; they will find the generation changed and abort
        self.ranks_by_column = {}
        self.indexes_by_order_by = {}
        self.table_indexes_by_order_by = {}
        self.pending_ranks = {}
        self.generation += 1

    def is_current(self, generation):
        return generation == self.generation
