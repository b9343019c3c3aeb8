"""Small value types shared by the font model.

This module defines the two composite values that appear in descriptor
files as comma separated integers: spacing (a point) and padding.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Point:
    """A pair of signed integers.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: int = 0
    y: int = 0

    def to_tuple(self) -> tuple[int, int]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Padding:
    """Insets applied uniformly to every glyph's source rectangle.

    Descriptor files store padding as ``top,right,bottom,left``; this type
    keeps the fields in left, top, right, bottom order.

    Attributes:
        left: Left inset
        top: Top inset
        right: Right inset
        bottom: Bottom inset
    """

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (left, top, right, bottom) tuple."""
        return (self.left, self.top, self.right, self.bottom)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "left": self.left,
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
        }
