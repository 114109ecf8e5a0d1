"""
CSS Sides Library - Side keywords for spacing properties.

A small, dependency-free library defining the closed vocabulary of CSS
side keywords (top, right, ..., inline-start, block-end) used when
building margin, padding and border properties.

Main Components:
    - ElementSide: Enum of the thirteen side keywords
    - InvalidKeywordError: Error for unrecognized keyword strings

Quick Start:
    >>> from css_sides_lib import ElementSide, from_wire_string
    >>>
    >>> side = from_wire_string("inline-start")
    >>> side is ElementSide.INLINE_START
    True
    >>> str(ElementSide.BLOCK_END)
    'block-end'
    >>> [s.value for s in ElementSide.HORIZONTAL.components]
    ['left', 'right']

License:
    MIT License
"""

__version__ = "0.1.0"

from .element_side import (
    ElementSide,
    # Backward compatibility
    ElementSideType,
    InvalidKeywordError,
    accepted_keywords,
    enumerate_sides,
    from_wire_string,
    is_defined,
    to_wire_string,
    try_from_wire_string,
)
from .sides_constants import (
    SIDE_ALL,
    SIDE_BLOCK_END,
    SIDE_BLOCK_START,
    SIDE_BOTTOM,
    SIDE_HORIZONTAL,
    SIDE_INLINE_END,
    SIDE_INLINE_START,
    SIDE_LEFT,
    SIDE_LEFT_RIGHT,
    SIDE_RIGHT,
    SIDE_TOP,
    SIDE_TOP_BOTTOM,
    SIDE_VERTICAL,
)

__all__ = [
    # Version
    "__version__",
    # Sides
    "ElementSide",
    "InvalidKeywordError",
    "enumerate_sides",
    "accepted_keywords",
    "to_wire_string",
    "from_wire_string",
    "try_from_wire_string",
    "is_defined",
    # Constants
    "SIDE_TOP",
    "SIDE_RIGHT",
    "SIDE_BOTTOM",
    "SIDE_LEFT",
    "SIDE_TOP_BOTTOM",
    "SIDE_LEFT_RIGHT",
    "SIDE_ALL",
    "SIDE_HORIZONTAL",
    "SIDE_VERTICAL",
    "SIDE_INLINE_START",
    "SIDE_INLINE_END",
    "SIDE_BLOCK_START",
    "SIDE_BLOCK_END",
    # Backward compatibility
    "ElementSideType",
]
