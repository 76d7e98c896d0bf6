import unittest
import doctest

from tallgrid import cancel
from tallgrid import channel

from tallgrid.dataframe import array as dataframe_array
from tallgrid.dataframe import filter as dataframe_filter
from tallgrid.dataframe import sortable as dataframe_sortable
from tallgrid.scale import construct as scale_construct
from tallgrid.scroll import utils as scroll_utils
from tallgrid.selection import convert as selection_convert
from tallgrid.selection import structure as selection_structure
from tallgrid.selection import utils as selection_utils
from tallgrid.sort import ranks as sort_ranks
from tallgrid.sort import structure as sort_structure


def load_tests(loader, tests, ignore):
    # Test the docstrings inside our actual codebase
    tests.addTests(doctest.DocTestSuite(cancel))
    tests.addTests(doctest.DocTestSuite(channel))
    tests.addTests(doctest.DocTestSuite(dataframe_array))
    tests.addTests(doctest.DocTestSuite(dataframe_filter))
    tests.addTests(doctest.DocTestSuite(dataframe_sortable))
    tests.addTests(doctest.DocTestSuite(scale_construct))
    tests.addTests(doctest.DocTestSuite(scroll_utils))
    tests.addTests(doctest.DocTestSuite(selection_convert))
    tests.addTests(doctest.DocTestSuite(selection_structure))
    tests.addTests(doctest.DocTestSuite(selection_utils))
    tests.addTests(doctest.DocTestSuite(sort_ranks))
    tests.addTests(doctest.DocTestSuite(sort_structure))

    # Some tests in the doctests style are too large to nicely fit into a docstring; better to keep them separate:
    tests.addTests(doctest.DocFileSuite("doctests/virtual_scroll.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/selection.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/sorting.txt"))
    tests.addTests(doctest.DocFileSuite("doctests/dataframes.txt"))

    return tests


if __name__ == '__main__':
    unittest.main()
