"""Media-device contracts for microphone permission requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class MediaDevices(Protocol):
    def get_user_media(self) -> bool: ...


@dataclass
class TestStateMediaDevices:
    """Grants every request and counts it in ``getUserMediaCalls``."""

    __test__ = False

    state: dict[str, Any]

    def get_user_media(self) -> bool:
        self.state["getUserMediaCalls"] += 1
        return True
