"""Emulation of the subset of Playwright's sync ``Page`` used by the voice UI tests."""

from __future__ import annotations

import logging
from typing import Any

from dom.elements import ElementState
from infra.config import Settings, load_settings
from infra.errors import StubError, TimeoutExceededError, UnsupportedExpressionError
from infra.logging import get_logger
from infra.polling import poll_until
from infra.time_utils import ms_to_seconds
from snippet.grammar import (
    ApplyThemeCall,
    AssignState,
    AsyncBlock,
    Lambda,
    QuerySelector,
    ReadState,
    SetMutedStateCall,
    Snippet,
)
from snippet.parser import parse_predicate, parse_snippet
from state.test_state import assign_path, new_test_state, resolve_path
from state.voice_lab import BODY_SELECTOR, FakeVoiceLabApp


class PageStub:
    """One simulated page: a test-state record plus a lazily created fake app."""

    def __init__(self, settings: Settings | None = None, logger: logging.Logger | None = None) -> None:
        self._settings = settings or load_settings()
        self._logger = logger or get_logger(
            primary_path=self._settings.log_path,
            level=self._settings.log_level,
        )
        self._test_state: dict[str, Any] = new_test_state()
        self._app: FakeVoiceLabApp | None = None
        self._init_scripts: list[str] = []
        self._closed = False
        self.url = "about:blank"

    @property
    def app(self) -> FakeVoiceLabApp:
        """The page's fake front-end, created on first use and never replaced."""
        if self._app is None:
            self._app = FakeVoiceLabApp(self._test_state, logger=self._logger)
        return self._app

    @property
    def test_state(self) -> dict[str, Any]:
        return self._test_state

    # Lifecycle

    def add_init_script(self, script: str) -> None:
        self._init_scripts.append(script)

    def goto(self, url: str, wait_until: str = "load") -> None:
        del wait_until
        self.url = url
        _ = self.app

    def close(self) -> None:
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    # DOM helpers

    def wait_for_selector(self, selector: str, timeout: float | None = None) -> None:
        timeout_ms = self._settings.selector_timeout_ms if timeout is None else timeout
        app = self.app
        try:
            poll_until(
                lambda: app.has_selector(selector),
                timeout_s=ms_to_seconds(timeout_ms),
                interval_s=self._settings.selector_poll_interval_s,
                description=f"waiting for selector {selector!r}",
            )
        except TimeoutExceededError:
            self._log_timeout("selector", selector, timeout_ms)
            raise

    def wait_for_function(self, expression: str, timeout: float | None = None) -> Any:
        """Re-evaluate an arrow-function predicate until it is truthy."""
        timeout_ms = self._settings.function_timeout_ms if timeout is None else timeout
        predicate = parse_predicate(expression)
        try:
            return poll_until(
                lambda: self._run(predicate),
                timeout_s=ms_to_seconds(timeout_ms),
                interval_s=self._settings.function_poll_interval_s,
                description=f"condition did not become truthy: {expression.strip()}",
            )
        except TimeoutExceededError:
            self._log_timeout("function", expression.strip(), timeout_ms)
            raise

    def dispatch_event(self, selector: str, event: str) -> None:
        app = self.app
        if selector == BODY_SELECTOR and event == "click":
            app.handle_body_click()

    def text_content(self, selector: str) -> str | None:
        return self.app.text_content(selector)

    def query_selector(self, selector: str) -> ElementState | None:
        return self.app.query_selector(selector)

    # Script evaluation

    def evaluate(self, expression: str) -> Any:
        try:
            snippet = parse_snippet(expression)
        except UnsupportedExpressionError as exc:
            self._logger.warning(str(exc), extra={"event_type": "snippet_rejected"})
            raise
        result = self._run(snippet)
        self._logger.debug(
            "snippet evaluated",
            extra={
                "event_type": "snippet_evaluated",
                "snippet_kind": type(snippet).__name__,
                "metadata": {"expression": expression.strip()},
            },
        )
        return result

    def _run(self, snippet: Snippet) -> Any:
        if isinstance(snippet, AssignState):
            assign_path(self._test_state, snippet.path, snippet.value)
            return None
        if isinstance(snippet, (ApplyThemeCall, SetMutedStateCall)):
            self._call_app(snippet)
            return None
        if isinstance(snippet, AsyncBlock):
            for call in snippet.calls:
                self._call_app(call)
            return None
        if isinstance(snippet, Lambda):
            return self._run(snippet.body)
        if isinstance(snippet, ReadState):
            value = resolve_path(self._test_state, snippet.path)
            if snippet.comparison is None:
                return value
            return snippet.comparison.apply(value)
        if isinstance(snippet, QuerySelector):
            element = self.app.query_selector(snippet.selector)
            if element is None or snippet.class_name is None:
                return element
            return element.class_contains(snippet.class_name)
        raise StubError(f"Unhandled snippet kind: {type(snippet).__name__}")

    def _call_app(self, call: ApplyThemeCall | SetMutedStateCall) -> None:
        if isinstance(call, ApplyThemeCall):
            self.app.apply_theme(call.theme, announce=call.announce, force=call.force)
        else:
            self.app.set_muted_state(call.muted, announce=call.announce)

    def _log_timeout(self, kind: str, target: str, timeout_ms: float) -> None:
        self._logger.error(
            "wait timed out",
            extra={"event_type": "wait_timeout", "metadata": {"kind": kind, "target": target, "timeout_ms": timeout_ms}},
        )
