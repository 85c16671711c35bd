"""
Turkish Sign Language Recognition

Classifies a hand pose, given as 21 3D hand landmarks, into one of ten
Turkish signs by matching finger curls against hand-authored gesture
descriptions.
"""

__version__ = "0.1.0"

from .types import Finger, FingerCurl, FingerDirection, MatchResult, ResultSink
from .config import load_config, default_config, Cfg
from .geometry import InvalidFrameError, finger_curl, finger_direction, to_frame
from .gestures import GestureDescription, GestureEstimator, estimate
from .catalog import GESTURE_NAMES, build_catalog, describe
from .recognizer import SignLanguageRecognizer
from .session import RecognitionSession
from .sink_mock import MockSink

__all__ = [
    "Finger",
    "FingerCurl",
    "FingerDirection",
    "MatchResult",
    "ResultSink",
    "load_config",
    "default_config",
    "Cfg",
    "InvalidFrameError",
    "finger_curl",
    "finger_direction",
    "to_frame",
    "GestureDescription",
    "GestureEstimator",
    "estimate",
    "GESTURE_NAMES",
    "build_catalog",
    "describe",
    "SignLanguageRecognizer",
    "RecognitionSession",
    "MockSink",
]
