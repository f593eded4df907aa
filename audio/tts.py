"""TTS contracts and the test-state adapter standing in for speechSynthesis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class TTS(Protocol):
    """Text-to-speech protocol."""

    def speak(self, text: str) -> None: ...

    def stop(self) -> None: ...


@dataclass
class TestStateTTS:
    """Records each utterance into the page's ``speakCalls`` log."""

    __test__ = False

    state: dict[str, Any]

    def speak(self, text: str) -> None:
        # Looked up per call: tests may reassign speakCalls to a fresh list.
        self.state["speakCalls"].append(text)

    def stop(self) -> None:
        return None
