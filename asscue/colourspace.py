"""Colour values module"""
from __future__ import annotations

__all__ = ['RGBA', 'DEFAULT_COLOUR', 'DEFAULT_SHADOW_COLOUR']

from typing import Final, NamedTuple


class RGBA(NamedTuple):
    """
    RGBA colour as decoded from ASS.
    Channels are in the range 0 - 255, alpha is an opacity in the range 0.0 - 1.0
    (1.0 means fully opaque) rounded to two decimals.
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    def to_css(self) -> str:
        """
        :return:            CSS-like functional notation, e.g. ``rgba(255, 0, 0, 1.00)``
        """
        return f'rgba({self.r}, {self.g}, {self.b}, {self.a:.2f})'

    def __str__(self) -> str:
        return self.to_css()


DEFAULT_COLOUR: Final[RGBA] = RGBA(255, 255, 255, 1.0)
"""Opaque white, used for every colour that cannot be decoded"""

DEFAULT_SHADOW_COLOUR: Final[RGBA] = RGBA(0, 0, 0, 0.8)
