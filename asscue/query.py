"""Active dialogues lookup module"""
from __future__ import annotations

__all__ = ['get_active_dialogues', 'DialogueIndex']

from bisect import bisect_left, bisect_right
from typing import List, Tuple

from .core import Dialogue, Document


def get_active_dialogues(document: Document, ms: int) -> Tuple[Dialogue, ...]:
    """
    Get every dialogue displayed at the given timestamp.
    Both start and end times are inclusive.

    :param document:    Document object
    :param ms:          Timestamp in milliseconds
    :return:            Active dialogues, in source order
    """
    return tuple(d for d in document.dialogues if d.is_active(ms))


class DialogueIndex:
    """
    Dialogues sorted by start time, for documents with many dialogues queried every frame.
    ``query`` gives the same result as :py:func:`get_active_dialogues`.
    """
    __slots__ = ('_entries', '_starts', '_max_duration')

    _entries: List[Tuple[int, int, Dialogue]]
    _starts: List[int]
    _max_duration: int

    def __init__(self, document: Document) -> None:
        """
        :param document:    Document object
        """
        # Dialogues ending before they start can never be active
        self._entries = sorted(
            (d.start_time, i, d) for i, d in enumerate(document.dialogues) if d.duration >= 0
        )
        self._starts = [start for start, _, _ in self._entries]
        self._max_duration = max((d.duration for _, _, d in self._entries), default=0)

    def __len__(self) -> int:
        return len(self._entries)

    def query(self, ms: int) -> Tuple[Dialogue, ...]:
        """
        :param ms:          Timestamp in milliseconds
        :return:            Active dialogues, in source order
        """
        lo = bisect_left(self._starts, ms - self._max_duration)
        hi = bisect_right(self._starts, ms)
        hits = sorted((i, d) for _, i, d in self._entries[lo:hi] if d.end_time >= ms)
        return tuple(d for _, d in hits)
