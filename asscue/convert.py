# asscue: parse ASS (Advanced SubStation Alpha) subtitles and resolve each cue into a renderer-neutral style.
# Copyright (C) 2024 asscue contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# asscue is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see http://www.gnu.org/licenses/.
"""Conversion module"""
from __future__ import annotations

__all__ = ['ConvertTime', 'ConvertColour']

import re
from typing import Final, Optional, Pattern

from more_itertools import sliced
from typing_extensions import TypeGuard

from .colourspace import DEFAULT_COLOUR, RGBA


class ConvertTime:
    """Time conversion class"""

    ASSTS_PATTERN: Final[Pattern[str]] = re.compile(r'(\d+):(\d{2}):(\d{2})\.(\d{2})', re.ASCII)

    # Ass Timestamp | Milliseconds
    @classmethod
    def assts2ms(cls, assts: Optional[str], /) -> int:
        """
        Convert an ASS timestamp ``H:MM:SS.CC`` to milliseconds.
        Anything not shaped like an ASS timestamp is the start of the timeline.

        :param assts:       ASS timestamp
        :return:            Milliseconds, 0 if the timestamp is malformed
        """
        if not assts or not (match := cls.ASSTS_PATTERN.fullmatch(assts)):
            return 0
        h, m, s, cs = map(int, match.groups())
        return h * 3_600_000 + m * 60_000 + s * 1_000 + cs * 10

    @staticmethod
    def ms2assts(ms: int, /) -> str:
        """
        Convert milliseconds to an ASS timestamp ``H:MM:SS.CC``.
        Negative values are clamped to 0, remaining milliseconds are truncated.

        :param ms:          Milliseconds
        :return:            ASS timestamp
        """
        cs = max(0, int(ms)) // 10
        s, cs = divmod(cs, 100)
        m, s = divmod(s, 60)
        h, m = divmod(m, 60)
        return f'{h:d}:{m:02d}:{s:02d}.{cs:02d}'


def _is_ass_colour(text: object) -> TypeGuard[str]:
    return isinstance(text, str) and text.startswith('&H')


class ConvertColour:
    """Colour conversion class"""

    ASSCOLOUR_PATTERN: Final[Pattern[str]] = re.compile(r'&H([0-9A-Fa-f]{8})')

    @classmethod
    def ass2rgba(cls, text: object, /) -> RGBA:
        """
        Convert an ASS colour of the form ``&HAABBGGRR`` to RGBA.
        Bytes are stored alpha first, then blue, green and red.
        An alpha byte of 0x00 is fully opaque, 0xFF fully transparent.

        :param text:        ASS colour string
        :return:            RGBA object, opaque white if the string cannot be decoded
        """
        if not _is_ass_colour(text) or not (match := cls.ASSCOLOUR_PATTERN.match(text)):
            return DEFAULT_COLOUR
        alpha, blue, green, red = (int(byte, 16) for byte in sliced(match.group(1), 2))
        return RGBA(red, green, blue, round(1 - alpha / 255, 2))
