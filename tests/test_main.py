"""
Test cases for the frame replay application.
"""
import asyncio
import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from synthetic import make_frame

from signpose.main import GestureReplayApp, main
from signpose.types import FingerCurl

NO = FingerCurl.NO_CURL
FULL = FingerCurl.FULL_CURL


class TestGestureReplayApp(unittest.TestCase):
    """Test replaying JSON Lines frames."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        merhaba = make_frame([NO] * 5).tolist()
        evet = make_frame([NO, FULL, FULL, FULL, FULL]).tolist()
        lines = [
            json.dumps(merhaba),
            json.dumps(merhaba),
            "{not json",
            "",
            json.dumps({"landmarks": evet}),
            json.dumps(evet[:20]),
            json.dumps({"other": 1}),
        ]
        self.frames_path = Path(self.tmp.name) / "frames.jsonl"
        self.frames_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def test_read_frames(self):
        app = GestureReplayApp(str(self.frames_path), interval_ms=0)
        with self.assertLogs("signpose.main", level="WARNING"):
            frames = list(app.read_frames())
        self.assertEqual(len(frames), 5)
        self.assertIsNone(frames[-1])

    def test_replay(self):
        app = GestureReplayApp(str(self.frames_path), interval_ms=0, speak=True)
        out = io.StringIO()
        with redirect_stdout(out):
            history = asyncio.run(app.run())
        self.assertEqual(history, ["Merhaba", "Evet"])
        self.assertEqual(app.sink.spoken, ["Merhaba", "Evet"])
        self.assertIn("History: Merhaba Evet", out.getvalue())

    def test_interval_from_config(self):
        app = GestureReplayApp(str(self.frames_path))
        self.assertAlmostEqual(app.interval_s, 0.1)
        self.assertIsNone(app.sink)


class TestMain(unittest.TestCase):
    """Test the command line entry point."""

    def test_list_gestures(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["gestures"])
        self.assertEqual(code, 0)
        self.assertIn("Evet: Thumb=NoCurl, Index=FullCurl", out.getvalue())
        self.assertEqual(len(out.getvalue().strip().splitlines()), 10)

    def test_missing_frames_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = io.StringIO()
            with redirect_stdout(out):
                code = main(["replay", str(Path(tmp) / "missing.jsonl"), "--interval-ms", "0"])
        self.assertEqual(code, 1)

    def _run(self, args):
        out = io.StringIO()
        with redirect_stdout(out):
            return main(args)

    def test_directory_as_frames_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertLogs("signpose.main", level="ERROR"):
                code = self._run(["replay", tmp, "--interval-ms", "0"])
        self.assertEqual(code, 1)

    def test_frames_file_not_utf8(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "frames.jsonl"
            path.write_bytes(b"\xff\xfe\x00[1, 2, 3]\n")
            with self.assertLogs("signpose.main", level="ERROR"):
                code = self._run(["replay", str(path), "--interval-ms", "0"])
        self.assertEqual(code, 1)

    def test_config_not_a_mapping(self):
        with tempfile.TemporaryDirectory() as tmp:
            frames = Path(tmp) / "frames.jsonl"
            frames.write_text("", encoding="utf-8")
            config = Path(tmp) / "config.yaml"
            config.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertLogs("signpose.main", level="ERROR"):
                code = self._run(["replay", str(frames), "--config", str(config)])
        self.assertEqual(code, 1)


if __name__ == '__main__':
    unittest.main()
