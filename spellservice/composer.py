"""
Composed word queries: the code points of a word plus the keyboard
coordinates they were typed at, as handed to a dictionary's suggestion lookup.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence, Tuple

NOT_A_COORDINATE = -1


class Keyboard(Protocol):
    """Keyboard geometry provider paired with a pooled dictionary."""

    proximity_info: Any

    def get_coordinates(self, code_points: Sequence[int]) -> Sequence[int]:
        """Return flattened (x, y) pairs, one pair per code point."""
        ...


@dataclass(frozen=True)
class ComposedWord:
    """A word as typed: text, code points and flattened x/y coordinates."""
    text: str
    code_points: Tuple[int, ...]
    coordinates: Tuple[int, ...]

    @property
    def has_geometry(self) -> bool:
        return any(c != NOT_A_COORDINATE for c in self.coordinates)


def compose_word(text: str, keyboard: Optional[Keyboard] = None) -> ComposedWord:
    """
    Build the composed query for text.

    Without a keyboard every coordinate is NOT_A_COORDINATE.
    """
    code_points = tuple(ord(c) for c in text)
    if keyboard is None:
        coordinates = (NOT_A_COORDINATE,) * (2 * len(code_points))
    else:
        coordinates = tuple(keyboard.get_coordinates(code_points))
    return ComposedWord(text, code_points, coordinates)
