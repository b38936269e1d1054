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
"""Style cascade module"""
from __future__ import annotations

__all__ = [
    'TextAlign', 'VerticalAnchor', 'HorizontalAnchor',
    'TextStyle', 'Position', 'ResolvedStyle',
    'resolve_style', 'resolve_alignment',
    'DEFAULT_FONT_SIZE', 'DEFAULT_MARGIN', 'DEFAULT_ALIGNMENT'
]

from enum import Enum
from typing import Any, Dict, Final, NamedTuple, Optional, Tuple

from ._logging import logger
from .colourspace import DEFAULT_COLOUR, DEFAULT_SHADOW_COLOUR, RGBA
from .core import Dialogue, Document, Style
from .exception import UndefinedStyleWarning
from .misc import first_truthy
from .tags import FontStyle, FontWeight, Overrides, TextDecoration

DEFAULT_FONT_SIZE: Final[float] = 24
DEFAULT_MARGIN: Final[int] = 20
DEFAULT_ALIGNMENT: Final[int] = 2
"""Bottom center"""
DEFAULT_SHADOW_OFFSET: Final[Tuple[float, float]] = (1, 1)


class TextAlign(str, Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


class VerticalAnchor(str, Enum):
    TOP = 'top'
    MIDDLE = 'middle'
    BOTTOM = 'bottom'


class HorizontalAnchor(str, Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


def _plain(v: Any) -> Any:
    if isinstance(v, RGBA):
        return v.to_css()
    if isinstance(v, Enum):
        return v.value
    return v


class TextStyle(NamedTuple):
    """Text attributes of a resolved dialogue"""
    color: RGBA
    font_family: Optional[str]
    font_size: float
    font_weight: FontWeight
    font_style: FontStyle
    text_decoration: TextDecoration
    letter_spacing: float
    shadow_color: RGBA
    shadow_radius: float
    shadow_offset: Tuple[float, float]
    text_align: TextAlign

    def to_dict(self) -> Dict[str, Any]:
        """
        :return:            Plain dict, colours as CSS strings and enums as their values
        """
        return {k: _plain(v) for k, v in self._asdict().items()}


class Position(NamedTuple):
    """
    Placement of a resolved dialogue on the frame.

    Edge distances (``top``, ``bottom``, ``left``, ``right``) are in pixels, None when
    the text isn't anchored to that edge.
    ``center_x`` and ``center_y`` anchor the text at the middle of the frame on that axis.
    ``translate_x`` is a fraction of the rendered text width, ``translate_y`` is in pixels;
    both shift the text after anchoring.
    ``absolute`` means ``left`` and ``top`` are the coordinates of an explicit \\pos.
    """
    vertical: VerticalAnchor
    horizontal: HorizontalAnchor
    top: Optional[float] = None
    bottom: Optional[float] = None
    left: Optional[float] = None
    right: Optional[float] = None
    center_x: bool = False
    center_y: bool = False
    translate_x: float = 0.0
    translate_y: float = 0.0
    absolute: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {k: _plain(v) for k, v in self._asdict().items()}


class ResolvedStyle(NamedTuple):
    text_style: TextStyle
    position: Position

    def to_dict(self) -> Dict[str, Any]:
        return {'text_style': self.text_style.to_dict(), 'position': self.position.to_dict()}


def resolve_alignment(overrides: Overrides, style: Optional[Style]) -> int:
    """
    Pick the alignment of a dialogue: \\an override first, then its style, then bottom center.
    Zero counts as unset. Values above 9 are kept, rows and columns are derived from them as is.

    :param overrides:   Overrides of the dialogue
    :param style:       Style of the dialogue, None if undefined
    :return:            Numpad alignment
    """
    return first_truthy(overrides.alignment, style.alignment if style else None, default=DEFAULT_ALIGNMENT)


def _base_text_style(style: Optional[Style]) -> TextStyle:
    if style is None:
        return TextStyle(
            color=DEFAULT_COLOUR,
            font_family=None,
            font_size=DEFAULT_FONT_SIZE,
            font_weight=FontWeight.NORMAL,
            font_style=FontStyle.NORMAL,
            text_decoration=TextDecoration.NONE,
            letter_spacing=0,
            shadow_color=DEFAULT_SHADOW_COLOUR,
            shadow_radius=0,
            shadow_offset=DEFAULT_SHADOW_OFFSET,
            text_align=TextAlign.CENTER,
        )
    return TextStyle(
        color=style.primary_color,
        font_family=style.fontname or None,
        font_size=style.fontsize or DEFAULT_FONT_SIZE,
        font_weight=FontWeight.BOLD if style.bold else FontWeight.NORMAL,
        font_style=FontStyle.ITALIC if style.italic else FontStyle.NORMAL,
        text_decoration=TextDecoration.UNDERLINE if style.underline else TextDecoration.NONE,
        letter_spacing=style.spacing or 0,
        shadow_color=style.outline_color,
        shadow_radius=style.shadow or 0,
        shadow_offset=DEFAULT_SHADOW_OFFSET,
        text_align=TextAlign.CENTER,
    )


def _apply_overrides(text_style: TextStyle, overrides: Overrides) -> TextStyle:
    changes: Dict[str, Any] = {
        k: v for k, v in (
            ('font_weight', overrides.font_weight),
            ('font_style', overrides.font_style),
            ('text_decoration', overrides.text_decoration),
            ('font_size', overrides.font_size),
            ('color', overrides.color),
        ) if v is not None
    }
    return text_style._replace(**changes)


def resolve_style(document: Document, dialogue: Dialogue) -> ResolvedStyle:
    """
    Compute the text style and the position of a dialogue.

    Precedence, from weakest to strongest:
    built-in defaults, the style named by the dialogue, the override tags of the dialogue.
    The alignment gives the anchor, margins come from the dialogue then from its style.
    An explicit \\pos replaces the computed position.

    :param document:    Document holding the styles
    :param dialogue:    Dialogue to resolve
    :return:            ResolvedStyle object
    """
    style = document.get_style(dialogue.style)
    if style is None:
        logger.debug(f'{UndefinedStyleWarning()}: style "{dialogue.style}" is not defined, using defaults')

    overrides = dialogue.overrides
    text_style = _apply_overrides(_base_text_style(style), overrides)

    an = resolve_alignment(overrides, style)
    pos: Dict[str, Any] = {}

    # Vertical position
    margin_v = first_truthy(dialogue.margin_v, style.margin_v if style else None, default=DEFAULT_MARGIN)
    if an >= 7:
        pos.update(vertical=VerticalAnchor.TOP, top=margin_v)
    elif an >= 4:
        pos.update(vertical=VerticalAnchor.MIDDLE, center_y=True, translate_y=-text_style.font_size / 2)
    else:
        pos.update(vertical=VerticalAnchor.BOTTOM, bottom=margin_v)

    # Horizontal position
    if an % 3 == 1:
        margin_l = first_truthy(dialogue.margin_l, style.margin_l if style else None, default=DEFAULT_MARGIN)
        pos.update(horizontal=HorizontalAnchor.LEFT, left=margin_l)
        text_align = TextAlign.LEFT
    elif an % 3 == 0:
        margin_r = first_truthy(dialogue.margin_r, style.margin_r if style else None, default=DEFAULT_MARGIN)
        pos.update(horizontal=HorizontalAnchor.RIGHT, right=margin_r)
        text_align = TextAlign.RIGHT
    else:
        pos.update(horizontal=HorizontalAnchor.CENTER, center_x=True, translate_x=-0.5)
        text_align = TextAlign.CENTER

    position = Position(**pos)
    if overrides.position is not None:
        position = Position(
            vertical=VerticalAnchor.TOP, horizontal=HorizontalAnchor.LEFT,
            left=overrides.position.x, top=overrides.position.y,
            absolute=True
        )

    return ResolvedStyle(text_style._replace(text_align=text_align), position)
