import threading

from tallgrid.errors import AbortError


class CancelToken(object):
    """
    Passed along with a fetch; the fetch checks it after each await and gives up (raising AbortError) once the host has
    cancelled it, e.g. because the user scrolled the requested rows out of view.

    >>> token = CancelToken()
    >>> token.cancelled
    False
    >>> token.cancel()
    >>> token.raise_if_cancelled()
    Traceback (most recent call last):
    ...
    tallgrid.errors.AbortError: Fetch aborted
    """

    def __init__(self):
        self._event = threading.Event()

    def __repr__(self):
        return "CancelToken(%s)" % ("cancelled" if self.cancelled else "active")

    @property
    def cancelled(self):
        return self._event.is_set()

    def cancel(self):
        self._event.set()

    def raise_if_cancelled(self):
        if self._event.is_set():
            raise AbortError()


def check_signal(signal):
    """Like signal.raise_if_cancelled(), but signal may be None (i.e. the fetch cannot be cancelled)."""
    if signal is not None:
        signal.raise_if_cancelled()
