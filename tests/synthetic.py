"""
Synthetic landmark frames for tests.
"""
import math
import sys
from pathlib import Path
from typing import Sequence

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from signpose.types import Finger, FingerCurl

# Angle at the first finger joint used to produce each curl level
CURL_ANGLES = {
    FingerCurl.NO_CURL: 180.0,
    FingerCurl.HALF_CURL: 95.0,
    FingerCurl.FULL_CURL: 30.0,
}

WRIST_XY = (100.0, 200.0)


def make_frame(curls: Sequence[FingerCurl], segment: float = 20.0, spacing: float = 15.0) -> np.ndarray:
    """
    Build a 21x3 frame whose fingers have the given curls, thumb first.

    Every finger base sits on a horizontal line above the wrist, the first
    segment points straight up and the rest of the finger is rotated so the
    angle at the first joint matches the requested curl.
    """
    frame = np.zeros((21, 3))
    frame[0] = (WRIST_XY[0], WRIST_XY[1], 0.0)
    for finger, curl in zip(Finger, curls):
        base_idx, mid_idx, mid2_idx, tip_idx = finger.landmark_indices
        base = np.array([70.0 + spacing * int(finger), 150.0, 0.0])
        mid = base + np.array([0.0, -segment, 0.0])
        theta = math.radians(CURL_ANGLES[curl])
        # Segment back to the base points down (0, 1); rotate it by theta
        direction = np.array([-math.sin(theta), math.cos(theta), 0.0])
        frame[base_idx] = base
        frame[mid_idx] = mid
        frame[mid2_idx] = mid + direction * segment / 2
        frame[tip_idx] = mid + direction * segment
    return frame


def frame_with_finger(finger: Finger, base, tip) -> np.ndarray:
    """Frame of zeros except for one finger laid out on the straight line base -> tip."""
    frame = np.zeros((21, 3))
    base = np.asarray(base, dtype=float)
    tip = np.asarray(tip, dtype=float)
    for i, idx in enumerate(finger.landmark_indices):
        frame[idx] = base + (tip - base) * i / 3.0
    return frame
