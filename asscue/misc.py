"""Miscellaneous and utility functions"""
from __future__ import annotations

__all__ = ['parse_int', 'parse_float', 'first_truthy']

import re
from typing import Final, Optional, Pattern, TypeVar

_T = TypeVar('_T')

_INT_PATTERN: Final[Pattern[str]] = re.compile(r'\s*([+-]?\d+)', re.ASCII)
_FLOAT_PATTERN: Final[Pattern[str]] = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a string, ignoring whatever follows it

    :param text:        String to parse, possibly None
    :return:            Integer value or None if the string doesn't start with one
    """
    if text is None or not (match := _INT_PATTERN.match(text)):
        return None
    return int(match.group(1))


def parse_float(text: Optional[str]) -> Optional[float]:
    """
    Parse the leading decimal number of a string, ignoring whatever follows it

    :param text:        String to parse, possibly None
    :return:            Float value or None if the string doesn't start with one
    """
    if text is None or not (match := _FLOAT_PATTERN.match(text)):
        return None
    return float(match.group(1))


def first_truthy(*values: Optional[_T], default: _T) -> _T:
    """
    Return the first truthy value, falling back to ``default``.
    Zero counts as unset, like an empty ASS margin.

    :param values:      Candidate values, in priority order
    :param default:     Value returned when none of the candidates is truthy
    :return:            Selected value
    """
    for v in values:
        if v:
            return v
    return default
