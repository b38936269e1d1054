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
"""Main core module"""
from __future__ import annotations

__all__ = [
    'ScriptInfo', 'Style', 'Dialogue', 'Document',
    'STYLE_FIELDS', 'DIALOGUE_FIELDS'
]

from itertools import islice
from types import MappingProxyType
from typing import Final, Iterator, Mapping, NamedTuple, Optional, Sequence, Tuple

from more_itertools import padded

from .colourspace import RGBA
from .convert import ConvertColour, ConvertTime
from .exception import MatchNotFoundError
from .misc import parse_float, parse_int
from .tags import Overrides, parse_override_tags

STYLE_FIELDS: Final[Tuple[str, ...]] = (
    'Name', 'Fontname', 'Fontsize', 'PrimaryColour', 'SecondaryColour', 'OutlineColour', 'BackColour',
    'Bold', 'Italic', 'Underline', 'StrikeOut', 'ScaleX', 'ScaleY', 'Spacing', 'Angle',
    'BorderStyle', 'Outline', 'Shadow', 'Alignment', 'MarginL', 'MarginR', 'MarginV', 'Encoding'
)
"""Field order of a ``Style:`` line"""

DIALOGUE_FIELDS: Final[Tuple[str, ...]] = (
    'Layer', 'Start', 'End', 'Style', 'Name', 'MarginL', 'MarginR', 'MarginV', 'Effect', 'Text'
)
"""Field order of a ``Dialogue:`` line"""


def _fields(parts: Sequence[str], n: int) -> Tuple[Optional[str], ...]:
    # Short rows are padded with None, extra fields are dropped
    return tuple(islice(padded(parts, None, n), n))


def _style_bool(v: Optional[str]) -> Optional[bool]:
    return None if v is None else v == '-1'


class ScriptInfo(Mapping[str, str]):
    """
    Read-only key/value pairs of the [Script Info] section.

    More info about each of them can be found on http://docs.aegisub.org/manual/Styles
    """
    __slots__ = '__data'

    def __init__(self, data: Mapping[str, str] | None = None, /) -> None:
        self.__data = dict(data) if data else {}

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(__o.items())

    def __hash__(self) -> int:
        return hash(frozenset(self.__data.items()))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.__data!r})'

    @property
    def title(self) -> Optional[str]:
        return self.get('Title')

    @property
    def script_type(self) -> Optional[str]:
        return self.get('ScriptType')

    @property
    def wrap_style(self) -> Optional[int]:
        """Determines how line breaking is applied to the subtitle line"""
        return parse_int(self.get('WrapStyle'))

    @property
    def play_res_x(self) -> Optional[int]:
        """Video width"""
        return parse_int(self.get('PlayResX'))

    @property
    def play_res_y(self) -> Optional[int]:
        """Video height"""
        return parse_int(self.get('PlayResY'))

    @property
    def scaled_border_and_shadow(self) -> Optional[bool]:
        """Determines if it has to be used script resolution (*True*) or video resolution (*False*) to scale border and shadow"""
        if (v := self.get('ScaledBorderAndShadow')) is None:
            return None
        return v.strip().lower() == 'yes'


class Style(NamedTuple):
    """
    Style object contains a set of typographic formatting rules that is applied to dialogue lines.
    Fields missing from a short ``Style:`` row, or that cannot be parsed, are None,
    except colours which fall back to opaque white.

    More info about styles can be found on http://docs.aegisub.org/3.2/ASS_Tags/.
    """
    name: str
    """Style name"""
    fontname: Optional[str]
    """Font name"""
    fontsize: Optional[float]
    """Font size in points"""
    primary_color: RGBA
    """Primary color (fill)"""
    secondary_color: RGBA
    """Secondary color (secondary fill, for karaoke effect)"""
    outline_color: RGBA
    """Outline (border) color"""
    back_color: RGBA
    """Shadow / background color"""
    bold: Optional[bool]
    """Font with bold"""
    italic: Optional[bool]
    """Font with italic"""
    underline: Optional[bool]
    """Font with underline"""
    strikeout: Optional[bool]
    """Font with strikeout"""
    scale_x: Optional[float]
    """Text stretching in the horizontal direction"""
    scale_y: Optional[float]
    """Text stretching in the vertical direction"""
    spacing: Optional[float]
    """Horizontal spacing between letters"""
    angle: Optional[float]
    """Rotation of the text"""
    border_style: Optional[int]
    """1 for outline and drop shadow, 3 for opaque box"""
    outline: Optional[float]
    """Border thickness value"""
    shadow: Optional[float]
    """How far downwards and to the right a shadow is drawn"""
    alignment: Optional[int]
    """Alignment of the text, numpad layout in the range 1 - 9"""
    margin_l: Optional[int]
    """Distance from the left of the video frame"""
    margin_r: Optional[int]
    """Distance from the right of the video frame"""
    margin_v: Optional[int]
    """Distance from the bottom (or top if alignment >= 7) of the video frame"""
    encoding: Optional[int]
    """Codepage used to map codepoints to glyphs"""

    def an_is_left(self) -> bool:
        return self.alignment in {1, 4, 7}

    def an_is_center(self) -> bool:
        return self.alignment in {2, 5, 8}

    def an_is_right(self) -> bool:
        return self.alignment in {3, 6, 9}

    def an_is_top(self) -> bool:
        return self.alignment in {7, 8, 9}

    def an_is_middle(self) -> bool:
        return self.alignment in {4, 5, 6}

    def an_is_bottom(self) -> bool:
        return self.alignment in {1, 2, 3}

    @classmethod
    def from_text(cls, text: str) -> Style:
        """
        Make a Style object from an .ass text line

        :param text:        Style text, starting by "Style:"
        :return:            Style object
        """
        if not text.startswith('Style:'):
            raise MatchNotFoundError(f'{cls.__name__}: No Style match found for this line!')

        (
            name, fontname, fontsize, color1, color2, color3, color4,
            bold, italic, underline, strikeout, scale_x, scale_y, spacing, angle,
            border_style, outline, shadow, alignment, margin_l, margin_r, margin_v, encoding
        ) = _fields([part.strip() for part in text[6:].split(',')], len(STYLE_FIELDS))

        return cls(
            name=name or '',
            fontname=fontname,
            fontsize=parse_float(fontsize),
            primary_color=ConvertColour.ass2rgba(color1),
            secondary_color=ConvertColour.ass2rgba(color2),
            outline_color=ConvertColour.ass2rgba(color3),
            back_color=ConvertColour.ass2rgba(color4),
            bold=_style_bool(bold),
            italic=_style_bool(italic),
            underline=_style_bool(underline),
            strikeout=_style_bool(strikeout),
            scale_x=parse_float(scale_x),
            scale_y=parse_float(scale_y),
            spacing=parse_float(spacing),
            angle=parse_float(angle),
            border_style=parse_int(border_style),
            outline=parse_float(outline),
            shadow=parse_float(shadow),
            alignment=parse_int(alignment),
            margin_l=parse_int(margin_l),
            margin_r=parse_int(margin_r),
            margin_v=parse_int(margin_v),
            encoding=parse_int(encoding),
        )


class Dialogue(NamedTuple):
    """
    Dialogue object contains informations about a single timed line of the [Events] section.

    ``plain_text`` and ``overrides`` are derived from ``text`` when the line is parsed.
    """
    layer: Optional[int]
    """Layer for the line. Higher layer numbers are drawn on top of lower ones"""
    start_time: int
    """Start time (in milliseconds)"""
    end_time: int
    """End time (in milliseconds)"""
    style: Optional[str]
    """Name of the referenced Style"""
    actor: Optional[str]
    """Actor field"""
    margin_l: Optional[int]
    """Left margin for this line"""
    margin_r: Optional[int]
    """Right margin for this line"""
    margin_v: Optional[int]
    """Vertical margin for this line"""
    effect: Optional[str]
    """Effect field"""
    text: str
    """Line raw text, override blocks included"""
    plain_text: str
    """Line text without override blocks"""
    overrides: Overrides
    """Overrides collected from the override blocks"""

    @property
    def duration(self) -> int:
        """Duration (in milliseconds)"""
        return self.end_time - self.start_time

    def is_active(self, ms: int) -> bool:
        """
        :param ms:          Timestamp in milliseconds
        :return:            True if the timestamp is inside [start_time, end_time]
        """
        return self.start_time <= ms <= self.end_time

    @classmethod
    def from_text(cls, text: str) -> Dialogue:
        """
        Make a Dialogue object from an .ass text line

        :param text:        An .ass line starting by "Dialogue:"
        :return:            A Dialogue object
        """
        if not text.startswith('Dialogue:'):
            raise MatchNotFoundError(f'{cls.__name__}: No Dialogue match found for this line!')

        # Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
        # Text is the last field and may contain commas
        linesplit = text[9:].split(',')
        ntext = len(DIALOGUE_FIELDS) - 1
        layer, start, end, style, actor, margin_l, margin_r, margin_v, effect = _fields(
            [part.strip() for part in linesplit[:ntext]], ntext
        )
        raw_text = ','.join(linesplit[ntext:])
        plain_text, overrides = parse_override_tags(raw_text)

        return cls(
            layer=parse_int(layer),
            start_time=ConvertTime.assts2ms(start),
            end_time=ConvertTime.assts2ms(end),
            style=style,
            actor=actor,
            margin_l=parse_int(margin_l),
            margin_r=parse_int(margin_r),
            margin_v=parse_int(margin_v),
            effect=effect,
            text=raw_text,
            plain_text=plain_text,
            overrides=overrides,
        )


class Document(NamedTuple):
    """Parsed content of an .ass file"""
    script_info: ScriptInfo
    """Key/value pairs of [Script Info]"""
    styles: Mapping[str, Style]
    """Read-only mapping of the styles by name. The last definition of a name wins"""
    dialogues: Tuple[Dialogue, ...]
    """Dialogues in source order"""

    @classmethod
    def build(
        cls, script_info: Mapping[str, str] | None = None,
        styles: Mapping[str, Style] | None = None,
        dialogues: Sequence[Dialogue] = ()
    ) -> Document:
        """
        Make a Document from mutable containers, taking read-only copies of them

        :param script_info:     Script Info key/value pairs
        :param styles:          Styles by name
        :param dialogues:       Dialogues in source order
        :return:                Document object
        """
        return cls(
            ScriptInfo(script_info),
            MappingProxyType(dict(styles) if styles else {}),
            tuple(dialogues),
        )

    def get_style(self, name: Optional[str]) -> Optional[Style]:
        """
        :param name:        Style name
        :return:            The Style with this name or None if it's not defined
        """
        return None if name is None else self.styles.get(name)
