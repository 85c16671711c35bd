"""
Command line application: replays recorded landmark frames through the recognizer.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional

import yaml

from .catalog import build_catalog
from .config import load_config
from .recognizer import SignLanguageRecognizer
from .session import RecognitionSession
from .sink_mock import MockSink
from .types import Finger

logger = logging.getLogger(__name__)


class GestureReplayApp:
    """Feeds landmark frames from a JSON Lines file to a recognition session."""

    def __init__(self, frames_path: str, config_path: Optional[str] = None,
                 speak: bool = False, interval_ms: Optional[int] = None):
        """
        Initialize the application with configuration.

        Args:
            frames_path: JSON Lines file, one frame per line
            config_path: YAML config file. If None, uses the packaged defaults
            speak: Send recognized signs to the mock sink
            interval_ms: Delay between frames. If None, uses the config value
        """
        self.config = load_config(config_path)
        self.frames_path = Path(frames_path)
        if interval_ms is None:
            interval_ms = self.config.replay.interval_ms
        self.interval_s = max(0, interval_ms) / 1000.0

        self.recognizer = SignLanguageRecognizer(self.config)
        self.recognizer.initialize()
        self.sink = MockSink() if speak else None
        self.session = RecognitionSession(
            self.recognizer,
            history_size=self.config.session.history_size,
            sink=self.sink
        )

    def read_frames(self) -> Iterator:
        """
        Yield raw frames from the frames file.

        A line holds either a list of 21 [x, y, z] points or an object with a
        "landmarks" key. Lines that are not valid JSON are skipped.
        """
        with open(self.frames_path, 'r', encoding='utf-8') as f:
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.warning("Skipping line %d of %s: %s", line_no, self.frames_path, e)
                    continue
                if isinstance(data, dict):
                    data = data.get("landmarks")
                yield data

    async def run(self) -> List[str]:
        """
        Run the replay loop.

        Returns:
            The recognition history at the end of the replay
        """
        print(f"Replaying {self.frames_path}")
        for index, frame in enumerate(self.read_frames()):
            if index and self.interval_s:
                await asyncio.sleep(self.interval_s)
            result = self.session.update(frame)
            if result:
                print(f"Frame {index}: {result}")

        print(f"History: {self.session.text}")
        return self.session.history


def list_gestures() -> None:
    """Print every known gesture with its expected finger curls."""
    for description in build_catalog():
        parts = []
        for finger in Finger:
            constraint = description.curls[finger]
            if constraint is not None:
                parts.append(f"{finger.label}={constraint[0].value}")
        print(f"{description.name}: {', '.join(parts)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="signpose", description="Turkish sign recognition from hand landmarks")
    sub = parser.add_subparsers(dest="cmd", required=True)

    replay = sub.add_parser("replay", help="Recognize signs in recorded landmark frames (JSON Lines)")
    replay.add_argument("frames")
    replay.add_argument("--config", default=None, help="YAML config file")
    replay.add_argument("--interval-ms", type=int, default=None, help="Delay between frames")
    replay.add_argument("--speak", action="store_true", help="Send recognized signs to the mock speaker")

    sub.add_parser("gestures", help="List known gestures")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.cmd == "gestures":
        list_gestures()
        return 0

    try:
        app = GestureReplayApp(args.frames, config_path=args.config,
                               speak=args.speak, interval_ms=args.interval_ms)
        asyncio.run(app.run())
    except (OSError, UnicodeDecodeError) as e:
        # Missing, unreadable or non UTF-8 frames/config file
        logger.error("%s", e)
        return 1
    except (ValueError, yaml.YAMLError) as e:
        logger.error("Invalid config: %s", e)
        return 1
    except KeyboardInterrupt:
        print("\nReplay interrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
