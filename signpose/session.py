"""
Recognition session: tracks the current prediction and a rolling history of signs.
"""
import logging
from collections import deque
from typing import List, Optional

from .recognizer import SignLanguageRecognizer
from .types import ResultSink

logger = logging.getLogger(__name__)


class RecognitionSession:
    """
    Feeds frames to a recognizer and keeps what was recognized.

    A sign is recorded only when it differs from the current prediction, so
    holding a pose over many frames records it once. The history keeps the
    most recent history_size signs, oldest dropped first.
    """

    def __init__(self, recognizer: SignLanguageRecognizer, history_size: int = 10,
                 sink: Optional[ResultSink] = None):
        if history_size < 1:
            raise ValueError(f"history_size must be positive, got {history_size}")
        self.recognizer = recognizer
        self.sink = sink
        self.prediction: Optional[str] = None
        self._history: deque = deque(maxlen=history_size)

    def update(self, landmarks) -> Optional[str]:
        """
        Process one frame.

        Args:
            landmarks: 21 landmark points of one hand

        Returns:
            The newly recognized gesture name, or None if nothing new was recognized
        """
        result = self.recognizer.recognize(landmarks)
        if result is None or result == self.prediction:
            return None

        self.prediction = result
        self._history.append(result)
        logger.debug("Recognized %s", result)
        if self.sink is not None:
            self.sink.speak(result)
        return result

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def text(self) -> str:
        """History as a sentence."""
        return " ".join(self._history)

    def clear(self) -> None:
        """Forget the current prediction and the history."""
        self.prediction = None
        self._history.clear()
