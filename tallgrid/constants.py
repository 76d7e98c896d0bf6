ROW_HEIGHT = 33  # px

DEFAULT_PADDING = 20  # rows rendered above and below the visible ones

ARIA_OFFSET = 2  # row indexes are 1-based, and the header takes index 1

# Render surfaces cap the height of a single element; 8M px is below the limit of every engine we know of (Firefox
# being the lowest at ~17.9M px).
MAX_ELEMENT_HEIGHT = 8000000

# 500 rows (16,500 px, ~0.2% of an 8M px canvas). Mouse-wheel scrolling stays below it and is handled locally; dragging
# the scrollbar, or scrolling with the wheel for a long time, goes above it and triggers a global resynchronisation.
LARGE_SCROLL_ROWS = 500
LARGE_SCROLL_PX = LARGE_SCROLL_ROWS * ROW_HEIGHT

# More rendered rows than this means the geometry and the scroll state disagree.
MAX_RENDERED_ROWS = 1000
