"""Simulated Talk to Unity front-end: mute/listen and theme state machine."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from audio.microphone import MediaDevices, TestStateMediaDevices
from audio.stt import Recognition, TestStateRecognition
from audio.tts import TTS, TestStateTTS
from dom.elements import ElementState
from infra.logging import get_logger

MUTE_INDICATOR_SELECTOR = "#mute-indicator"
INDICATOR_TEXT_SELECTOR = "#mute-indicator .indicator-text"
USER_CIRCLE_SELECTOR = '[data-role="user"]'
BODY_SELECTOR = "body"

LISTENING_CLASS = "is-listening"
MUTED_PROMPT = "Tap or click anywhere to unmute"
LISTENING_PROMPT = "Listening… tap to mute"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def normalize(cls, value: object) -> "Theme":
        """Only the literal ``"light"`` selects the light theme."""
        return cls.LIGHT if value == cls.LIGHT.value else cls.DARK


class MicState(str, Enum):
    MUTED = "muted"
    LISTENING = "listening"


class FakeVoiceLabApp:
    """Owns the voice UI behaviour and delegates audio concerns to adapters."""

    def __init__(
        self,
        test_state: dict[str, Any],
        *,
        tts: TTS | None = None,
        recognition: Recognition | None = None,
        media_devices: MediaDevices | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.state = test_state
        self.current_theme = Theme.DARK
        self.is_muted = True
        self._tts = tts or TestStateTTS(test_state)
        self._recognition = recognition or TestStateRecognition(test_state)
        self._media_devices = media_devices or TestStateMediaDevices(test_state)
        self._mic_permission_granted = False
        self._logger = logger or get_logger()

        self.body = ElementState()
        self.body.dataset["theme"] = self.current_theme.value
        self.body.add_class("js-enabled")

        self.user_circle = ElementState()
        self.mute_indicator = ElementState()
        self.mute_indicator.dataset["state"] = MicState.MUTED.value
        self.indicator_text = ElementState(MUTED_PROMPT)

    @property
    def mic_state(self) -> MicState:
        return MicState.MUTED if self.is_muted else MicState.LISTENING

    # Event handlers

    def handle_body_click(self) -> None:
        if self.is_muted:
            self.set_muted_state(False)

    # Core behaviour

    def speak(self, message: object) -> None:
        text = str(message)
        if not text:
            return
        self._tts.speak(text)
        self._logger.info("speak", extra={"event_type": "speak", "metadata": {"text": text}})

    def set_muted_state(self, muted: bool, announce: bool = False) -> None:
        """Apply the muted flag; counters move only when the flag actually changes.

        ``announce`` speaks the resulting state even when nothing changed.
        """
        previous = self.mic_state
        if muted:
            if not self.is_muted:
                self._recognition.stop()
            self.is_muted = True
        else:
            if self.is_muted:
                self._request_microphone()
                self._recognition.start()
            self.is_muted = False

        self._render_mic_state()
        if previous is not self.mic_state:
            self._logger.info(
                "microphone state changed",
                extra={
                    "event_type": "mute_transition",
                    "state": self.mic_state.value,
                    "metadata": {"from": previous.value, "announce": announce},
                },
            )
        if announce:
            self.speak("Microphone muted." if self.is_muted else "Microphone unmuted.")

    def apply_theme(self, theme: object, announce: bool = False, force: bool = False) -> None:
        normalized = Theme.normalize(theme)
        changed = force or normalized is not self.current_theme
        self.current_theme = normalized
        self.body.dataset["theme"] = normalized.value
        self._logger.info(
            "theme applied",
            extra={
                "event_type": "theme_applied",
                "state": normalized.value,
                "metadata": {"requested": str(theme), "changed": changed, "force": force},
            },
        )

        if announce:
            label = normalized.value.capitalize()
            if changed:
                self.speak(f"{label} theme activated.")
            else:
                self.speak(f"{label} theme is already active.")

    # Queries

    def has_selector(self, selector: str) -> bool:
        return selector == MUTE_INDICATOR_SELECTOR

    def text_content(self, selector: str) -> str | None:
        if selector == INDICATOR_TEXT_SELECTOR:
            return self.indicator_text.text
        return None

    def query_selector(self, selector: str) -> ElementState | None:
        elements = {
            USER_CIRCLE_SELECTOR: self.user_circle,
            BODY_SELECTOR: self.body,
            MUTE_INDICATOR_SELECTOR: self.mute_indicator,
        }
        return elements.get(selector)

    def _request_microphone(self) -> None:
        if self._mic_permission_granted:
            return
        self._mic_permission_granted = self._media_devices.get_user_media()

    def _render_mic_state(self) -> None:
        listening = not self.is_muted
        self.user_circle.toggle_class(LISTENING_CLASS, listening)
        self.mute_indicator.dataset["state"] = self.mic_state.value
        self.indicator_text.text = LISTENING_PROMPT if listening else MUTED_PROMPT
