"""
Gesture descriptions and the estimator that scores landmark frames against them.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import CurlConfig
from .geometry import InvalidFrameError, finger_curl, finger_direction, to_frame
from .types import Finger, FingerCurl, FingerDirection, MatchResult

logger = logging.getLogger(__name__)

# (expected value, weight) for one finger, None when the finger is unconstrained
CurlConstraint = Optional[Tuple[FingerCurl, float]]
DirectionConstraint = Optional[Tuple[FingerDirection, float]]


class GestureDescription:
    """
    Named set of per-finger curl and direction constraints describing one hand pose.

    Fingers that are never constrained do not affect the score. Once frozen
    (the catalog freezes every entry) a description can no longer be changed.
    """

    def __init__(self, name: str):
        if not name:
            raise ValueError("Gesture name must not be empty")
        self.name = name
        self._curls: List[CurlConstraint] = [None] * len(Finger)
        self._directions: List[DirectionConstraint] = [None] * len(Finger)
        self._frozen = False

    def add_curl(self, finger: Finger, curl: FingerCurl, weight: float = 1.0) -> "GestureDescription":
        """
        Expect a curl level for a finger.

        Registering the same finger twice replaces the earlier constraint.

        Args:
            finger: Finger to constrain
            curl: Expected curl level
            weight: Contribution of this finger to the score, in (0, 1]

        Returns:
            The description itself, for chaining
        """
        self._check_editable(weight)
        finger = Finger(finger)
        if self._curls[finger] is not None:
            logger.warning("Gesture %r: curl for %s registered twice, keeping the last one",
                           self.name, finger.label)
        self._curls[finger] = (FingerCurl(curl), float(weight))
        return self

    def add_direction(self, finger: Finger, direction: FingerDirection,
                      weight: float = 1.0) -> "GestureDescription":
        """Expect a pointing direction for a finger. Same rules as add_curl."""
        self._check_editable(weight)
        finger = Finger(finger)
        if self._directions[finger] is not None:
            logger.warning("Gesture %r: direction for %s registered twice, keeping the last one",
                           self.name, finger.label)
        self._directions[finger] = (FingerDirection(direction), float(weight))
        return self

    def freeze(self) -> "GestureDescription":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def curls(self) -> Tuple[CurlConstraint, ...]:
        """Curl constraints indexed by Finger."""
        return tuple(self._curls)

    @property
    def directions(self) -> Tuple[DirectionConstraint, ...]:
        """Direction constraints indexed by Finger."""
        return tuple(self._directions)

    @property
    def max_score(self) -> float:
        """Raw score when every constraint matches: the sum of all weights."""
        return sum(c[1] for c in self._curls + self._directions if c is not None)

    def match(self, curls: Sequence[FingerCurl],
              directions: Sequence[Optional[FingerDirection]],
              mismatch_penalty: float = 0.0) -> float:
        """
        Raw score of detected per-finger features against this description.

        Every matching constraint adds its weight, every mismatching one
        subtracts mismatch_penalty times its weight.
        """
        score = 0.0
        for finger in Finger:
            for expected, detected in ((self._curls[finger], curls[finger]),
                                       (self._directions[finger], directions[finger])):
                if expected is None:
                    continue
                value, weight = expected
                if detected == value:
                    score += weight
                else:
                    score -= mismatch_penalty * weight
        return score

    def _check_editable(self, weight: float) -> None:
        if self._frozen:
            raise RuntimeError(f"Gesture {self.name!r} is frozen")
        if not 0.0 < weight <= 1.0:
            raise ValueError(f"Weight must be in (0, 1], got {weight}")

    def __repr__(self) -> str:
        curls = ", ".join(f"{Finger(i).label}={c[0].value}"
                          for i, c in enumerate(self._curls) if c is not None)
        return f"GestureDescription({self.name!r}, {curls})"


@dataclass(frozen=True)
class FrameFeatures:
    """Per-finger features of one landmark frame, indexed by Finger."""
    curls: Tuple[FingerCurl, ...]
    directions: Tuple[Optional[FingerDirection], ...]


class GestureEstimator:
    """
    Scores landmark frames against a fixed catalog of gesture descriptions.

    Scores are scaled so that a gesture whose every constraint matches gets
    exactly max_score. The estimator keeps no state between frames.
    """

    def __init__(self, catalog: Iterable[GestureDescription],
                 curl_limits: Optional[CurlConfig] = None,
                 mismatch_penalty: float = 3.0,
                 max_score: float = 10.0):
        """
        Initialize the estimator.

        Args:
            catalog: Gesture descriptions, scored in iteration order
            curl_limits: Joint angle limits for the curl levels
            mismatch_penalty: Weight multiplier subtracted per mismatching constraint
            max_score: Score of a fully matching gesture
        """
        self.catalog = tuple(catalog)
        self.curl_limits = curl_limits or CurlConfig()
        self.mismatch_penalty = mismatch_penalty
        self.max_score = max_score

    def features(self, frame) -> FrameFeatures:
        """Compute curl and direction of every finger of a valid frame."""
        curls = tuple(
            finger_curl(frame, finger,
                        self.curl_limits.no_curl_start_limit,
                        self.curl_limits.half_curl_start_limit)
            for finger in Finger
        )
        directions = tuple(finger_direction(frame, finger) for finger in Finger)
        return FrameFeatures(curls=curls, directions=directions)

    def score(self, description: GestureDescription, features: FrameFeatures) -> float:
        """Score of one gesture on the 0..max_score scale."""
        total = description.max_score
        if total <= 0.0:
            return 0.0
        raw = description.match(features.curls, features.directions, self.mismatch_penalty)
        return self.max_score * raw / total

    def estimate(self, landmarks, threshold: float) -> List[MatchResult]:
        """
        Score a frame against every gesture in the catalog.

        Args:
            landmarks: 21 landmark points (anything to_frame accepts)
            threshold: Minimum score for a gesture to be reported

        Returns:
            Matches scoring at or above threshold, in catalog order. Empty
            if the frame is malformed.
        """
        try:
            frame = to_frame(landmarks)
        except InvalidFrameError as e:
            logger.debug("Skipping frame: %s", e)
            return []

        features = self.features(frame)
        matches = []
        for description in self.catalog:
            score = self.score(description, features)
            if score >= threshold:
                matches.append(MatchResult(name=description.name, score=score))
        return matches


def estimate(landmarks, catalog: Iterable[GestureDescription], threshold: float,
             curl_limits: Optional[CurlConfig] = None,
             mismatch_penalty: float = 3.0,
             max_score: float = 10.0) -> List[MatchResult]:
    """Score a frame against a catalog in one call. See GestureEstimator.estimate."""
    estimator = GestureEstimator(catalog, curl_limits=curl_limits,
                                 mismatch_penalty=mismatch_penalty, max_score=max_score)
    return estimator.estimate(landmarks, threshold)
