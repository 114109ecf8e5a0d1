"""
Element Sides Constants.

This module defines the canonical wire strings for CSS side keywords,
grouped by kind.
"""

# Physical sides
SIDE_TOP = "top"
SIDE_RIGHT = "right"
SIDE_BOTTOM = "bottom"
SIDE_LEFT = "left"

# Combined sides
SIDE_TOP_BOTTOM = "top-bottom"
SIDE_LEFT_RIGHT = "left-right"
SIDE_ALL = "all"
SIDE_HORIZONTAL = "horizontal"
SIDE_VERTICAL = "vertical"

# Logical sides (writing-mode relative)
SIDE_INLINE_START = "inline-start"
SIDE_INLINE_END = "inline-end"
SIDE_BLOCK_START = "block-start"
SIDE_BLOCK_END = "block-end"
