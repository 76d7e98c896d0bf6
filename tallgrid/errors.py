"""
Programming errors (contract violations) are the norm here: they indicate a bug in the host or in a data source, and
are not meant to be caught. The single exception is AbortError, which is the expected outcome of cancelling a fetch
and which hosts are free to ignore.
"""


class TallGridError(Exception):
    pass


class ConfigurationError(TallGridError, ValueError):
    """Invalid geometry parameters for a Scale."""


class InvalidIndexError(TallGridError, ValueError):
    pass


class InvalidRangeError(TallGridError, ValueError):
    pass


class InvalidRangesError(TallGridError, ValueError):
    pass


class InvalidColumnError(TallGridError, ValueError):
    pass


class InvalidOrderByError(TallGridError, ValueError):
    pass


class InvalidRowError(TallGridError, IndexError):
    pass


class DataConsistencyError(TallGridError):
    """Two pieces of data that should agree (a permutation and a row count, say) don't."""


class AbortError(TallGridError):
    """A fetch was cancelled through its CancelToken."""

    def __init__(self, message="Fetch aborted"):
        super(AbortError, self).__init__(message)
