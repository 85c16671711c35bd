"""
Turkish Sign Language gestures recognized by the system.

Every gesture is a single static hand pose described by finger curls only.
Signs that are performed with a motion (Hayır, Teşekkürler) are described by
the pose the hand holds during the motion, so some pairs share the same
pattern and are resolved by catalog order.
"""
import logging
from typing import Dict, Iterable, Optional, Tuple

from .gestures import GestureDescription
from .types import Finger, FingerCurl

logger = logging.getLogger(__name__)

NO = FingerCurl.NO_CURL
HALF = FingerCurl.HALF_CURL
FULL = FingerCurl.FULL_CURL

# name -> curls for (thumb, index, middle, ring, pinky), in catalog order
GESTURE_TABLE: Dict[str, Tuple[FingerCurl, ...]] = {
    "Merhaba": (NO, NO, NO, NO, NO),           # open hand
    "Teşekkürler": (NO, NO, NO, NO, NO),       # flat hand moving towards the mouth
    "Evet": (NO, FULL, FULL, FULL, FULL),      # fist, thumb up
    "Hayır": (FULL, NO, FULL, FULL, FULL),     # index finger shaken side to side
    "Lütfen": (HALF, HALF, HALF, HALF, HALF),  # palm up, fingers slightly bent
    "Yardım": (NO, NO, FULL, FULL, FULL),
    "Su": (NO, NO, NO, FULL, FULL),
    "Acıktım": (HALF, HALF, HALF, HALF, HALF),
    "Nasılsın": (FULL, NO, NO, FULL, FULL),
    "İyiyim": (NO, FULL, FULL, FULL, FULL),    # thumb up
}

GESTURE_NAMES: Tuple[str, ...] = tuple(GESTURE_TABLE)


def describe(name: str, curls: Optional[Tuple[FingerCurl, ...]] = None,
             weight: float = 1.0) -> GestureDescription:
    """Build a description expecting the given curl for each finger, thumb first.

    Without curls the description is empty and can be filled with add_curl.
    """
    description = GestureDescription(name)
    for finger, curl in zip(Finger, curls or ()):
        description.add_curl(finger, curl, weight)
    return description


def build_catalog(table: Optional[Iterable[Tuple[str, Tuple[FingerCurl, ...]]]] = None
                  ) -> Tuple[GestureDescription, ...]:
    """
    Build a fresh, frozen catalog of gestures.

    Args:
        table: (name, curls) pairs to build from. Defaults to GESTURE_TABLE

    Returns:
        Gesture descriptions in their fixed recognition order

    Raises:
        ValueError: if two gestures share a name
    """
    catalog = []
    seen = set()
    if table is None:
        table = GESTURE_TABLE.items()
    for name, curls in table:
        if name in seen:
            raise ValueError(f"Duplicate gesture name: {name}")
        seen.add(name)
        catalog.append(describe(name, curls).freeze())

    logger.debug("Built gesture catalog with %d entries", len(catalog))
    return tuple(catalog)
