"""
Utils for testing.
"""
import asyncio
import contextlib
import logging


def run(coroutine):
    """Doctests have no event loop of their own; this runs a coroutine to completion and returns its result."""
    return asyncio.run(coroutine)


class RowLoader:
    """A `load_rows` for a RemoteDataFrame, over rows (dicts) in memory. Records the calls it receives.

    With `hold=True` every load waits until release() is called, which lets a test observe (and interfere with) the
    state of a fetch that is in flight.
    """

    def __init__(self, rows, hold=False):
        self.rows = rows
        self.hold = hold
        self.calls = []
        self._gate = None

    def gate(self):
        # created lazily: an asyncio.Event belongs to the loop it's first used in
        if self._gate is None:
            self._gate = asyncio.Event()
        return self._gate

    def release(self):
        self.gate().set()

    async def __call__(self, row_start, row_end, columns):
        self.calls.append((row_start, row_end, list(columns)))
        if self.hold:
            await self.gate().wait()
        else:
            await asyncio.sleep(0)
        return [{column: row[column] for column in columns} for row in self.rows[row_start:row_end]]


def print_events(channel):
    """Connects a receiver that prints whatever is broadcast on the channel; returns the disconnect function."""

    def receive(event):
        print("EVENT", event)

    return channel.connect(receive)


class PrintHandler(logging.Handler):
    def emit(self, record):
        print("LOG", record.getMessage())


@contextlib.contextmanager
def print_logs(logger, level=logging.WARNING):
    """Prints the records of at least `level` that `logger` emits inside the block."""
    handler = PrintHandler(level)
    logger.addHandler(handler)
    try:
        yield
    finally:
        logger.removeHandler(handler)
