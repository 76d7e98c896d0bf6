"""
The tunables of the engines live in a `tallgrid` section of Kivy's global Config, so that a host application can
override them the same way it overrides any other Kivy setting:

    Config.set('tallgrid', 'large_scroll_px', '33000')

The defaults come from tallgrid.constants.
"""
from kivy.config import Config

from tallgrid.constants import (
    DEFAULT_PADDING,
    LARGE_SCROLL_PX,
    MAX_ELEMENT_HEIGHT,
    MAX_RENDERED_ROWS,
)

SECTION = 'tallgrid'

Config.setdefaults(SECTION, {
    'large_scroll_px': LARGE_SCROLL_PX,
    'padding': DEFAULT_PADDING,
    'max_element_height': MAX_ELEMENT_HEIGHT,
    'max_rendered_rows': MAX_RENDERED_ROWS,
})


def get_large_scroll_px():
    return Config.getfloat(SECTION, 'large_scroll_px')


def get_padding():
    return Config.getint(SECTION, 'padding')


def get_max_element_height():
    return Config.getfloat(SECTION, 'max_element_height')


def get_max_rendered_rows():
    return Config.getint(SECTION, 'max_rendered_rows')
