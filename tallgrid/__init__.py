"""
tallgrid: the engines behind a table that shows a small window of rows out of an arbitrarily large (possibly remote)
dataset, while keeping the scrollbar, the row selection and the sort order consistent with the full dataset.

The package has no rendering code; a host (a Kivy widget, a terminal UI, a web bridge) owns the geometry and the
events, and plays them into the structures defined here.
"""
import os

# Kivy parses sys.argv on import unless told otherwise; as a library we must leave the host's command line alone.
os.environ.setdefault("KIVY_NO_ARGS", "1")
