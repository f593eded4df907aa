"""Speech recognition contracts and the counting test-state adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class Recognition(Protocol):
    """Continuous speech recognition session."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


@dataclass
class TestStateRecognition:
    """Counts start/stop calls the way the in-page SpeechRecognition stub does."""

    __test__ = False

    state: dict[str, Any]
    active: bool = False

    def start(self) -> None:
        if self.active:
            return
        self.active = True
        self.state["recognitionStartCalls"] += 1

    def stop(self) -> None:
        if not self.active:
            return
        self.active = False
        self.state["recognitionStopCalls"] += 1
