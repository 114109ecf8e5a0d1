"""
Element Side Module.

This module provides the ElementSide enumeration, the closed vocabulary
of CSS side keywords used to build spacing properties such as margin,
padding or border.

Main Components:
    ElementSide: Enum of the thirteen side keywords. Each member wraps its
        canonical wire string ("top", "inline-start", ...).

    InvalidKeywordError: Raised when a string is not a canonical keyword.

    enumerate_sides(), to_wire_string(), from_wire_string(): Functional
        helpers for iteration and serialization.

Example:
    >>> from css_sides_lib import ElementSide, from_wire_string
    >>>
    >>> ElementSide.INLINE_START.value
    'inline-start'
    >>> from_wire_string("top-bottom")
    <ElementSide.TOP_BOTTOM: 'top-bottom'>
    >>> ElementSide.ALL.components
    (<ElementSide.TOP: 'top'>, <ElementSide.RIGHT: 'right'>, ...)

Backward Compatibility:
    The following alias is provided for code written against the second
    vocabulary name:
    - ElementSideType → ElementSide
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

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

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())


class InvalidKeywordError(ValueError):
    """
    Exception raised when a string is not a recognized side keyword.

    Attributes:
        keyword: The offending input, exactly as received.
        accepted: Tuple of tokens that would have been accepted.
    """

    def __init__(
        self,
        keyword: object,
        accepted: tuple[str, ...] = (),
        kind: str = "side keyword",
    ):
        super().__init__(keyword, accepted, kind)
        self.keyword = keyword
        self.accepted = accepted
        self.kind = kind

    def __str__(self) -> str:
        return (
            f"Invalid {self.kind}: {self.keyword!r} "
            f"(accepted: {', '.join(self.accepted)})"
        )


# =============================================================================
# Element Side Enum
# =============================================================================


class ElementSide(Enum):
    """
    CSS element side keyword.

    Members are declared in canonical order and that order is used for
    comparisons, so ``ElementSide.TOP < ElementSide.BLOCK_END`` holds
    even though "top" sorts after "block-end" alphabetically.

    Values:
        TOP, RIGHT, BOTTOM, LEFT: A single physical edge of the element.

        TOP_BOTTOM: Top and bottom edges, same as setting both to one value.

        LEFT_RIGHT: Left and right edges, same as setting both to one value.

        ALL: All four physical edges.

        HORIZONTAL: Horizontal edges (left and right).

        VERTICAL: Vertical edges (top and bottom).

        INLINE_START: Start of the inline axis. Left in left-to-right
                      text, right in right-to-left text.

        INLINE_END: End of the inline axis. Right in left-to-right text,
                    left in right-to-left text.

        BLOCK_START: Start of the block axis. Top in top-to-bottom
                     writing modes, bottom in bottom-to-top ones.

        BLOCK_END: End of the block axis. Bottom in top-to-bottom
                   writing modes, top in bottom-to-top ones.
    """

    TOP = SIDE_TOP
    RIGHT = SIDE_RIGHT
    BOTTOM = SIDE_BOTTOM
    LEFT = SIDE_LEFT
    TOP_BOTTOM = SIDE_TOP_BOTTOM
    LEFT_RIGHT = SIDE_LEFT_RIGHT
    ALL = SIDE_ALL
    HORIZONTAL = SIDE_HORIZONTAL
    VERTICAL = SIDE_VERTICAL
    INLINE_START = SIDE_INLINE_START
    INLINE_END = SIDE_INLINE_END
    BLOCK_START = SIDE_BLOCK_START
    BLOCK_END = SIDE_BLOCK_END

    def __str__(self) -> str:
        return self.value

    # -------------------------------------------------------------------------
    # Ordering (declaration order)
    # -------------------------------------------------------------------------

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return _DECLARATION_INDEX[self] < _DECLARATION_INDEX[other]
        return NotImplemented

    def __le__(self, other):
        if self.__class__ is other.__class__:
            return _DECLARATION_INDEX[self] <= _DECLARATION_INDEX[other]
        return NotImplemented

    def __gt__(self, other):
        if self.__class__ is other.__class__:
            return _DECLARATION_INDEX[self] > _DECLARATION_INDEX[other]
        return NotImplemented

    def __ge__(self, other):
        if self.__class__ is other.__class__:
            return _DECLARATION_INDEX[self] >= _DECLARATION_INDEX[other]
        return NotImplemented

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def components(self) -> tuple[ElementSide, ...]:
        """
        Single-edge sides covered by this side.

        Combined sides expand to the edges they set (ALL gives the four
        physical edges). Single physical and logical sides return a
        one-element tuple containing themselves.
        """
        return _COMPONENTS.get(self, (self,))

    @property
    def is_logical(self) -> bool:
        """True for sides relative to writing mode (inline/block)."""
        return self in _LOGICAL_SIDES

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @classmethod
    def from_wire_string(cls, keyword: str) -> ElementSide:
        """Alias of the module-level from_wire_string()."""
        return from_wire_string(keyword)

    @classmethod
    def from_name(cls, name: str) -> ElementSide:
        """
        Look up a side by member name.

        Args:
            name: Member name, e.g. "INLINE_START". Case-sensitive.

        Returns:
            The matching ElementSide.

        Raises:
            InvalidKeywordError: If no member has that name.
        """
        side = cls.try_from_name(name)
        if side is None:
            raise InvalidKeywordError(
                name, tuple(cls.__members__), kind="side name"
            )
        return side

    @classmethod
    def try_from_name(cls, name: str) -> ElementSide | None:
        """Look up a side by member name, returning None if not found."""
        if not isinstance(name, str):
            return None
        return cls.__members__.get(name)


# Backward compatibility alias
ElementSideType = ElementSide


# =============================================================================
# Lookup Tables
# =============================================================================

_DECLARATION_INDEX: dict[ElementSide, int] = {
    side: index for index, side in enumerate(ElementSide)
}

_BY_WIRE_STRING: dict[str, ElementSide] = {side.value: side for side in ElementSide}

_PHYSICAL_EDGES = (
    ElementSide.TOP,
    ElementSide.RIGHT,
    ElementSide.BOTTOM,
    ElementSide.LEFT,
)

_COMPONENTS: dict[ElementSide, tuple[ElementSide, ...]] = {
    ElementSide.TOP_BOTTOM: (ElementSide.TOP, ElementSide.BOTTOM),
    ElementSide.VERTICAL: (ElementSide.TOP, ElementSide.BOTTOM),
    ElementSide.LEFT_RIGHT: (ElementSide.LEFT, ElementSide.RIGHT),
    ElementSide.HORIZONTAL: (ElementSide.LEFT, ElementSide.RIGHT),
    ElementSide.ALL: _PHYSICAL_EDGES,
}

_LOGICAL_SIDES = frozenset(
    {
        ElementSide.INLINE_START,
        ElementSide.INLINE_END,
        ElementSide.BLOCK_START,
        ElementSide.BLOCK_END,
    }
)


# =============================================================================
# Functions
# =============================================================================


def enumerate_sides() -> Iterator[ElementSide]:
    """
    Iterate over all sides in declaration order.

    Each call returns a fresh iterator.
    """
    return iter(ElementSide)


def accepted_keywords() -> tuple[str, ...]:
    """Get all canonical wire strings in declaration order."""
    return tuple(side.value for side in enumerate_sides())


def to_wire_string(side: ElementSide) -> str:
    """Get the canonical wire string for a side."""
    return side.value


def from_wire_string(keyword: str) -> ElementSide:
    """
    Parse a wire string into an ElementSide.

    Matching is exact: no case folding, no whitespace trimming.

    Args:
        keyword: Canonical wire string, e.g. "inline-start".

    Returns:
        The matching ElementSide.

    Raises:
        InvalidKeywordError: If keyword is not a canonical wire string.

    Examples:
        >>> from_wire_string("top")
        <ElementSide.TOP: 'top'>
        >>> from_wire_string("Top")
        Traceback (most recent call last):
        ...
        InvalidKeywordError: Invalid side keyword: 'Top' (accepted: top, ...)
    """
    side = try_from_wire_string(keyword)
    if side is None:
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug(f"keyword_rejected: {keyword!r}")
        raise InvalidKeywordError(keyword, accepted_keywords())
    return side


def try_from_wire_string(keyword: str) -> ElementSide | None:
    """Parse a wire string, returning None if it is not recognized."""
    if not isinstance(keyword, str):
        return None
    return _BY_WIRE_STRING.get(keyword)


def is_defined(keyword: str) -> bool:
    """Check whether keyword is a canonical wire string."""
    return try_from_wire_string(keyword) is not None
