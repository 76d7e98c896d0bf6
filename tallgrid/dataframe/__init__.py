"""
Data sources ("dataframes") for the table: the contract the engines consume, and a few implementations and wrappers.

A dataframe gives synchronous access to the cells it has already loaded (get_cell returns None for a pending cell),
and optionally an asynchronous, cancellable `fetch` that loads a range of rows. Static frames have `fetch = None`.
Every dataframe has a `channel` on which it broadcasts the events of tallgrid.dataframe.events.
"""
