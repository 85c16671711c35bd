"""
One-shot sign recognition: landmark frame in, gesture name out.
"""
import logging
from typing import Optional, Tuple

from .catalog import build_catalog
from .config import Cfg, default_config
from .gestures import GestureDescription, GestureEstimator

logger = logging.getLogger(__name__)


class SignLanguageRecognizer:
    """
    Owns the gesture catalog and picks the best matching gesture for a frame.

    Calls are independent: no result is cached between frames.
    """

    def __init__(self, cfg: Optional[Cfg] = None):
        """Initialize the recognizer with configuration. Call initialize() before use."""
        self.cfg = cfg or default_config()
        self._catalog: Tuple[GestureDescription, ...] = ()
        self._estimator: Optional[GestureEstimator] = None

    def initialize(self) -> bool:
        """Build the gesture catalog and estimator. Safe to call more than once."""
        self._catalog = build_catalog()
        self._estimator = GestureEstimator(
            self._catalog,
            curl_limits=self.cfg.curl,
            mismatch_penalty=self.cfg.recognizer.mismatch_penalty,
            max_score=self.cfg.recognizer.max_score
        )
        logger.info("Sign language recognizer initialized with %d gestures", len(self._catalog))
        return True

    @property
    def is_initialized(self) -> bool:
        return self._estimator is not None

    @property
    def catalog(self) -> Tuple[GestureDescription, ...]:
        return self._catalog

    @property
    def estimator(self) -> Optional[GestureEstimator]:
        return self._estimator

    def recognize(self, landmarks) -> Optional[str]:
        """
        Recognize the gesture shown in a frame.

        Args:
            landmarks: 21 landmark points of one hand

        Returns:
            Name of the best scoring gesture, or None if nothing reaches the
            threshold, the frame is malformed or the recognizer is not initialized
        """
        if self._estimator is None:
            return None

        matches = self._estimator.estimate(landmarks, self.cfg.recognizer.threshold)
        if not matches:
            return None

        # Strictly greater wins, so ties go to the gesture listed first
        best = matches[0]
        for match in matches[1:]:
            if match.score > best.score:
                best = match
        return best.name
