"""
CSS Colors
==========

Color model shared by every renderer.

Types:
- ColorName: the 16 basic CSS keywords
- CSSColor: named keyword OR explicit RGB triple (tagged union)
- Style: stroke/fill paint settings attached to shapes
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import supervision as sv


class ColorName(str, Enum):
    """Basic CSS color keywords."""

    BLACK = "black"
    SILVER = "silver"
    GRAY = "gray"
    WHITE = "white"
    MAROON = "maroon"
    RED = "red"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    GREEN = "green"
    LIME = "lime"
    OLIVE = "olive"
    YELLOW = "yellow"
    NAVY = "navy"
    BLUE = "blue"
    TEAL = "teal"
    AQUA = "aqua"


# CSS Color Module Level 1 values
_NAMED_RGB = {
    ColorName.BLACK: (0, 0, 0),
    ColorName.SILVER: (192, 192, 192),
    ColorName.GRAY: (128, 128, 128),
    ColorName.WHITE: (255, 255, 255),
    ColorName.MAROON: (128, 0, 0),
    ColorName.RED: (255, 0, 0),
    ColorName.PURPLE: (128, 0, 128),
    ColorName.FUCHSIA: (255, 0, 255),
    ColorName.GREEN: (0, 128, 0),
    ColorName.LIME: (0, 255, 0),
    ColorName.OLIVE: (128, 128, 0),
    ColorName.YELLOW: (255, 255, 0),
    ColorName.NAVY: (0, 0, 128),
    ColorName.BLUE: (0, 0, 255),
    ColorName.TEAL: (0, 128, 128),
    ColorName.AQUA: (0, 255, 255),
}


@dataclass(frozen=True)
class CSSColor:
    """
    Immutable CSS color: exactly one of `name` or `rgb_value` is set.

    Use the constructors instead of the raw fields:
        >>> str(CSSColor.named(ColorName.FUCHSIA))
        'fuchsia'
        >>> str(CSSColor.rgb(100, 100, 100))
        '#646464'
        >>> str(CSSColor.gray(0xAA))
        '#AAAAAA'
    """

    name: Optional[ColorName] = None
    rgb_value: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        """Validate the tagged union."""
        if (self.name is None) == (self.rgb_value is None):
            raise ValueError("CSSColor needs exactly one of name or rgb_value")
        if self.name is not None:
            object.__setattr__(self, "name", ColorName(self.name))
        if self.rgb_value is not None:
            if len(self.rgb_value) != 3:
                raise ValueError(f"rgb_value must have 3 channels, got {self.rgb_value}")
            for channel in self.rgb_value:
                if not 0 <= int(channel) <= 255:
                    raise ValueError(f"RGB channel must be in [0, 255], got {channel}")
            object.__setattr__(self, "rgb_value", tuple(int(c) for c in self.rgb_value))

    @classmethod
    def named(cls, name: ColorName) -> "CSSColor":
        return cls(name=name)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "CSSColor":
        return cls(rgb_value=(red, green, blue))

    @classmethod
    def gray(cls, level: int) -> "CSSColor":
        """Grayscale shortcut: same value on every channel."""
        return cls.rgb(level, level, level)

    def as_rgb(self) -> Tuple[int, int, int]:
        """Resolve to an (r, g, b) triple."""
        if self.name is not None:
            return _NAMED_RGB[self.name]
        return self.rgb_value

    def to_sv_color(self) -> sv.Color:
        r, g, b = self.as_rgb()
        return sv.Color(r=r, g=g, b=b)

    def __str__(self) -> str:
        if self.name is not None:
            return self.name.value
        return "#{:02X}{:02X}{:02X}".format(*self.rgb_value)


@dataclass(frozen=True)
class Style:
    """
    Paint settings for a shape.

    Attributes:
        stroke_color: Outline color
        fill_color: Interior color (None = no fill)
        stroke_width: Outline width in pixels
    """

    stroke_color: CSSColor = CSSColor.named(ColorName.RED)
    fill_color: Optional[CSSColor] = CSSColor.named(ColorName.YELLOW)
    stroke_width: float = 5

    def __post_init__(self):
        if self.stroke_width < 0:
            raise ValueError(f"stroke_width must be >= 0, got {self.stroke_width}")

    def scaled(self, factor: float) -> "Style":
        return Style(self.stroke_color, self.fill_color, self.stroke_width * factor)


DEFAULT_STYLE = Style()
RECTANGLE_STYLE = Style(
    stroke_color=CSSColor.named(ColorName.TEAL),
    fill_color=CSSColor.named(ColorName.AQUA),
)
