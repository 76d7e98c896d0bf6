"""
The dsn-like 'scale' maps the position of a scrollbar onto the logical (virtual) height of a table.

Render surfaces cannot address arbitrarily tall elements; a table of 20 million rows of 33px is about 660 million px
tall, well above what any browser or GPU texture supports. The canvas we actually scroll is therefore capped, and the
scrollbar position is scaled up to find the logical position in the table. As long as the table fits, the scale is
the identity.
"""
