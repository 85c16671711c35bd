"""
Mock result sink for testing recognized sign output.
"""
from typing import List


class MockSink:
    """Mock sink that prints signs instead of speaking them."""

    def __init__(self, verbose: bool = True):
        """Initialize the mock sink."""
        self.verbose = verbose
        self.spoken: List[str] = []

    def speak(self, text: str) -> None:
        """Record and print the text instead of speaking it."""
        self.spoken.append(text)
        if self.verbose:
            print(f"[MockSink] Speak: {text} (call #{len(self.spoken)})")

    def reset(self) -> None:
        """Forget recorded utterances."""
        self.spoken.clear()
