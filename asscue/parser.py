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
"""ASS text parsing module"""
from __future__ import annotations

__all__ = [
    'Section', 'SectionParser',
    'ScriptInfoParser', 'StylesParser', 'EventsParser', 'IgnoredSectionParser',
    'DocumentBuilder', 'parse'
]

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Final, List, Optional, Pattern, Set

from ._logging import logger
from .core import Dialogue, Document, Style
from .exception import UnknownSectionWarning


class Section(Enum):
    """States of the parser, one per handled section"""
    NONE = None
    SCRIPT_INFO = 'Script Info'
    STYLES = 'V4+ Styles'
    EVENTS = 'Events'

    @classmethod
    def from_header(cls, name: str) -> Section:
        """
        :param name:        Section name, brackets stripped
        :return:            Matching Section, NONE for sections the parser doesn't handle
        """
        if name == 'V4 Styles':
            return cls.STYLES
        try:
            return cls(name)
        except ValueError:
            return cls.NONE


class DocumentBuilder:
    """Mutable accumulator filled by the section parsers, frozen into a Document"""
    __slots__ = ('script_info', 'styles', 'dialogues')

    def __init__(self) -> None:
        self.script_info: Dict[str, str] = {}
        self.styles: Dict[str, Style] = {}
        self.dialogues: List[Dialogue] = []

    def build(self) -> Document:
        return Document.build(self.script_info, self.styles, self.dialogues)


class SectionParser(ABC):
    """Line rule of a single parser state"""
    section: Section

    @abstractmethod
    def feed(self, line: str, builder: DocumentBuilder) -> bool:
        """
        Handle a trimmed, non-empty, non-comment line

        :param line:        Line text
        :param builder:     Accumulator of the document being parsed
        :return:            True if the line was used, False if it was skipped
        """
        ...


class IgnoredSectionParser(SectionParser):
    section = Section.NONE

    def feed(self, line: str, builder: DocumentBuilder) -> bool:
        return False


class ScriptInfoParser(SectionParser):
    section = Section.SCRIPT_INFO
    pattern: Final[Pattern[str]] = re.compile(r'([^:]+):(.*)', re.DOTALL)

    def feed(self, line: str, builder: DocumentBuilder) -> bool:
        if not (match := self.pattern.fullmatch(line)):
            return False
        builder.script_info[match[1].strip()] = match[2].strip()
        return True


class StylesParser(SectionParser):
    section = Section.STYLES

    def feed(self, line: str, builder: DocumentBuilder) -> bool:
        if not line.startswith('Style:'):
            return False
        style = Style.from_text(line)
        if style.name in builder.styles:
            logger.debug(f'Style "{style.name}" is redefined, the last definition wins', section=self.section.value)
        builder.styles[style.name] = style
        return True


class EventsParser(SectionParser):
    section = Section.EVENTS

    def feed(self, line: str, builder: DocumentBuilder) -> bool:
        if not line.startswith('Dialogue:'):
            return False
        builder.dialogues.append(Dialogue.from_text(line))
        return True


_PARSERS: Final[Dict[Section, SectionParser]] = {
    p.section: p for p in (IgnoredSectionParser(), ScriptInfoParser(), StylesParser(), EventsParser())
}


def _header(line: str) -> Optional[str]:
    if len(line) >= 2 and line.startswith('[') and line.endswith(']'):
        return line[1:-1]
    return None


def parse(text: str) -> Document:
    """
    Parse the content of an .ass file.

    The parser is lenient: lines it doesn't understand are skipped,
    malformed fields become None (or 0 for timestamps, opaque white for colours),
    and it never raises because of the content of the text.

    :param text:        Content of the .ass file
    :return:            Document object
    """
    builder = DocumentBuilder()
    state = Section.NONE
    seen: Set[Section] = set()

    for nb, line in enumerate(text.split('\n'), start=1):
        line = line.lstrip('\ufeff').strip()

        if (name := _header(line)) is not None:
            state = Section.from_header(name)
            seen.add(state)
            if state is Section.NONE:
                logger.debug(f'{UnknownSectionWarning()}: [{name}] at line {nb} is not handled, skipping its content')
            continue

        if not line or line.startswith(';'):
            continue

        if not _PARSERS[state].feed(line, builder):
            logger.trace(f'Line {nb} skipped: {line}', section=state.value or '-')

    if Section.EVENTS not in seen:
        logger.warning('There is no [Events] section in this text')

    document = builder.build()
    logger.debug(
        f'Parsed {len(document.script_info)} info entries, {len(document.styles)} styles '
        f'and {len(document.dialogues)} dialogues'
    )
    return document
