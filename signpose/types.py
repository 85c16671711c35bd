"""
Type definitions for the hand sign recognition system.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Protocol, Tuple, runtime_checkable


NUM_LANDMARKS = 21


class Finger(IntEnum):
    """Finger identifiers, in landmark order."""
    THUMB = 0
    INDEX = 1
    MIDDLE = 2
    RING = 3
    PINKY = 4

    @property
    def landmark_indices(self) -> Tuple[int, int, int, int]:
        """Four consecutive landmark indices of this finger, base to tip."""
        base = 1 + 4 * int(self)
        return (base, base + 1, base + 2, base + 3)

    @property
    def label(self) -> str:
        return self.name.capitalize()


class FingerCurl(Enum):
    """How bent a finger is."""
    NO_CURL = "NoCurl"
    HALF_CURL = "HalfCurl"
    FULL_CURL = "FullCurl"


class FingerDirection(Enum):
    """Image-plane direction a finger points to (y axis pointing down)."""
    VERTICAL_UP = "VerticalUp"
    VERTICAL_DOWN = "VerticalDown"
    HORIZONTAL_LEFT = "HorizontalLeft"
    HORIZONTAL_RIGHT = "HorizontalRight"
    DIAGONAL_UP_RIGHT = "DiagonalUpRight"
    DIAGONAL_UP_LEFT = "DiagonalUpLeft"
    DIAGONAL_DOWN_RIGHT = "DiagonalDownRight"
    DIAGONAL_DOWN_LEFT = "DiagonalDownLeft"


@dataclass(frozen=True)
class MatchResult:
    """Score of one gesture against one landmark frame."""
    name: str
    score: float  # 0..max_score, 10 by default


@runtime_checkable
class ResultSink(Protocol):
    """Consumer of newly recognized gesture text (e.g. speech output)."""

    def speak(self, text: str) -> None:
        """Handle a newly recognized gesture name."""
        ...
