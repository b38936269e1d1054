"""Inline override tags module"""
from __future__ import annotations

__all__ = [
    'FontWeight', 'FontStyle', 'TextDecoration',
    'Point', 'Overrides',
    'parse_override_tags'
]

import re
from enum import Enum
from typing import Any, Dict, Final, NamedTuple, Optional, Pattern, Tuple

from ._logging import logger
from .colourspace import RGBA
from .convert import ConvertColour
from .misc import parse_int


class FontWeight(str, Enum):
    NORMAL = 'normal'
    BOLD = 'bold'


class FontStyle(str, Enum):
    NORMAL = 'normal'
    ITALIC = 'italic'


class TextDecoration(str, Enum):
    NONE = 'none'
    UNDERLINE = 'underline'


class Point(NamedTuple):
    x: int
    y: int


class Overrides(NamedTuple):
    """
    Style overrides carried by the ``{\\...}`` blocks of a dialogue.
    A field set to None is inherited from the dialogue style.
    """
    font_size: Optional[int] = None
    """\\fs"""
    font_weight: Optional[FontWeight] = None
    """\\b1 and \\b0"""
    font_style: Optional[FontStyle] = None
    """\\i1 and \\i0"""
    text_decoration: Optional[TextDecoration] = None
    """\\u1 and \\u0"""
    color: Optional[RGBA] = None
    """\\c and \\1c"""
    position: Optional[Point] = None
    """\\pos"""
    alignment: Optional[int] = None
    """\\an"""

    def is_empty(self) -> bool:
        return all(v is None for v in self)


_BLOCK_PATTERN: Final[Pattern[str]] = re.compile(r'\{\\([^}]*)\}')
_POS_PATTERN: Final[Pattern[str]] = re.compile(r'pos\((\d+),(\d+)\)', re.ASCII)

_SWITCHES: Final[Dict[str, Tuple[str, Enum]]] = {
    'b1': ('font_weight', FontWeight.BOLD),
    'b0': ('font_weight', FontWeight.NORMAL),
    'i1': ('font_style', FontStyle.ITALIC),
    'i0': ('font_style', FontStyle.NORMAL),
    'u1': ('text_decoration', TextDecoration.UNDERLINE),
    'u0': ('text_decoration', TextDecoration.NONE),
}


def _parse_command(cmd: str) -> Optional[Tuple[str, Any]]:
    # Order matters: "fs" has to be tested before the colour tag
    if cmd.startswith('fs'):
        size = parse_int(cmd[2:])
        return None if size is None else ('font_size', size)
    if cmd in _SWITCHES:
        return _SWITCHES[cmd]
    if cmd.startswith(('1c', 'c')):
        idx = cmd.find('&H')
        return None if idx < 0 else ('color', ConvertColour.ass2rgba(cmd[idx:]))
    if cmd.startswith('pos'):
        if pos := _POS_PATTERN.match(cmd):
            return 'position', Point(int(pos[1]), int(pos[2]))
        return None
    if cmd.startswith('an'):
        an = parse_int(cmd[2:])
        return None if an is None else ('alignment', an)
    return None


def parse_override_tags(text: str) -> Tuple[str, Overrides]:
    """
    Strip every ``{\\...}`` block of a dialogue text and collect the overrides they hold.

    Blocks are not nested. Commands inside a block are separated by backslashes.
    When two blocks set the same override, the last one wins.
    Unknown commands are ignored.

    ::

        >>> text, overrides = parse_override_tags('Hello {\\\\b1\\\\i1}World')
        >>> text
        'Hello World'
        >>> overrides.font_weight, overrides.font_style
        (<FontWeight.BOLD: 'bold'>, <FontStyle.ITALIC: 'italic'>)

    :param text:        Raw dialogue text
    :return:            A tuple containing the text without override blocks and the Overrides object
    """
    fields: Dict[str, Any] = {}

    def _collect(match: re.Match[str]) -> str:
        for cmd in filter(None, match.group(1).split('\\')):
            if parsed := _parse_command(cmd):
                name, value = parsed
                fields[name] = value
            else:
                logger.trace(f'Ignored override command "{cmd}"')
        return ''

    plain_text = _BLOCK_PATTERN.sub(_collect, text)
    return plain_text, Overrides(**fields)
