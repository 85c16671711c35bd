"""
Finger curl and direction features computed from hand landmark frames.
"""
import math
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from .types import Finger, FingerCurl, FingerDirection, NUM_LANDMARKS


# Angle (degrees) at the first finger joint above which a finger counts as
# straight / half bent. Anything at or below the half limit is fully bent.
NO_CURL_START_LIMIT = 130.0
HALF_CURL_START_LIMIT = 60.0

_EPS = 1e-6

# 45 degree sectors, counter-clockwise starting at "pointing right"
_DIRECTION_SECTORS = (
    FingerDirection.HORIZONTAL_RIGHT,
    FingerDirection.DIAGONAL_UP_RIGHT,
    FingerDirection.VERTICAL_UP,
    FingerDirection.DIAGONAL_UP_LEFT,
    FingerDirection.HORIZONTAL_LEFT,
    FingerDirection.DIAGONAL_DOWN_LEFT,
    FingerDirection.VERTICAL_DOWN,
    FingerDirection.DIAGONAL_DOWN_RIGHT,
)


class InvalidFrameError(ValueError):
    """Raised when landmarks do not form a 21 point 3D frame."""


def _extract_point(entry: Any) -> Tuple[float, float, float]:
    if hasattr(entry, "x") and hasattr(entry, "y") and hasattr(entry, "z"):
        return (float(entry.x), float(entry.y), float(entry.z))
    if isinstance(entry, dict):
        return (float(entry["x"]), float(entry["y"]), float(entry["z"]))
    if isinstance(entry, (str, bytes)):
        raise InvalidFrameError(f"Landmark must not be a string: {entry!r}")
    values = tuple(entry)
    if len(values) != 3:
        raise InvalidFrameError(f"Expected 3 coordinates per landmark, got {len(values)}")
    return (float(values[0]), float(values[1]), float(values[2]))


def to_frame(points: Any) -> np.ndarray:
    """
    Coerce detector output into a landmark frame.

    Args:
        points: 21 landmarks as (x, y, z) sequences, dicts with x/y/z keys,
            objects with x/y/z attributes, a (21, 3) array, or a detector
            result exposing them through a ``landmark`` attribute

    Returns:
        Float array of shape (21, 3)

    Raises:
        InvalidFrameError: if the landmarks do not form a finite 21x3 frame
    """
    if points is None:
        raise InvalidFrameError("No landmarks given")
    if hasattr(points, "landmark"):
        points = points.landmark

    try:
        if isinstance(points, np.ndarray):
            frame = points.astype(float)
        else:
            frame = np.array([_extract_point(p) for p in points], dtype=float)
    except InvalidFrameError:
        raise
    except (TypeError, KeyError, ValueError) as e:
        raise InvalidFrameError(f"Unsupported landmark format: {e}") from e

    if frame.shape != (NUM_LANDMARKS, 3):
        raise InvalidFrameError(
            f"Expected {NUM_LANDMARKS} landmarks with 3 coordinates, got shape {frame.shape}"
        )
    if not np.all(np.isfinite(frame)):
        raise InvalidFrameError("Landmarks contain non-finite coordinates")
    return frame


def joint_angle(start: np.ndarray, mid: np.ndarray, end: np.ndarray) -> Optional[float]:
    """
    Angle ABC (in degrees) at joint B, via the law of cosines.

    Returns None when one of the segments touching the joint has zero length.
    """
    start_mid = float(np.linalg.norm(start - mid))
    mid_end = float(np.linalg.norm(end - mid))
    start_end = float(np.linalg.norm(end - start))
    if start_mid <= _EPS or mid_end <= _EPS:
        return None

    cos_in = (mid_end ** 2 + start_mid ** 2 - start_end ** 2) / (2 * mid_end * start_mid)
    cos_in = max(-1.0, min(1.0, cos_in))
    return math.degrees(math.acos(cos_in))


def curl_from_angle(angle: Optional[float],
                    no_curl_limit: float = NO_CURL_START_LIMIT,
                    half_curl_limit: float = HALF_CURL_START_LIMIT) -> FingerCurl:
    """Map a joint angle to a curl level. Undefined angles count as fully bent."""
    if angle is None:
        return FingerCurl.FULL_CURL
    if angle > no_curl_limit:
        return FingerCurl.NO_CURL
    if angle > half_curl_limit:
        return FingerCurl.HALF_CURL
    return FingerCurl.FULL_CURL


def finger_curl(frame: Sequence, finger: Finger,
                no_curl_limit: float = NO_CURL_START_LIMIT,
                half_curl_limit: float = HALF_CURL_START_LIMIT) -> FingerCurl:
    """
    Estimate how bent a finger is.

    The angle is measured at the first joint above the finger base, between
    the segment back to the base and the segment out to the fingertip. A
    straight finger gives 180 degrees.

    Args:
        frame: Landmark frame of shape (21, 3)
        finger: Finger to inspect
        no_curl_limit: Angles above this are NoCurl
        half_curl_limit: Angles above this (and up to no_curl_limit) are HalfCurl

    Returns:
        Curl level of the finger
    """
    base, mid, _, tip = Finger(finger).landmark_indices
    points = np.asarray(frame, dtype=float)
    angle = joint_angle(points[base], points[mid], points[tip])
    return curl_from_angle(angle, no_curl_limit, half_curl_limit)


def finger_direction(frame: Sequence, finger: Finger) -> Optional[FingerDirection]:
    """
    Estimate where a finger points in the image plane.

    Uses the vector from the finger base to its tip, with the image y axis
    growing downwards.

    Returns:
        Direction of the finger, or None when base and tip coincide in x/y
    """
    base, _, _, tip = Finger(finger).landmark_indices
    points = np.asarray(frame, dtype=float)
    dx = points[tip][0] - points[base][0]
    dy = points[tip][1] - points[base][1]
    if math.hypot(dx, dy) <= _EPS:
        return None

    angle = math.degrees(math.atan2(-dy, dx))
    sector = int(((angle + 22.5) % 360.0) // 45.0) % len(_DIRECTION_SECTORS)
    return _DIRECTION_SECTORS[sector]
