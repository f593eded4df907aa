"""Playwright-shaped sync API entry points backed by :class:`PageStub`.

The browser, context and playwright objects are plain containers: they hand
out pages and close what they created.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Optional

from browser.page import PageStub
from infra.config import Settings, load_settings
from infra.errors import StubError, TimeoutExceededError

Error = StubError
TimeoutError = TimeoutExceededError


class BrowserContextStub:
    """Provides pages that simulate the voice UI."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._pages: list[PageStub] = []

    @property
    def pages(self) -> list[PageStub]:
        return list(self._pages)

    def new_page(self) -> PageStub:
        page = PageStub(settings=self._settings)
        self._pages.append(page)
        return page

    def close(self) -> None:
        for page in self._pages:
            page.close()
        self._pages.clear()


class BrowserStub:
    """Container for browser contexts."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._contexts: list[BrowserContextStub] = []

    @property
    def contexts(self) -> list[BrowserContextStub]:
        return list(self._contexts)

    def new_context(self, *args: Any, **kwargs: Any) -> BrowserContextStub:
        context = BrowserContextStub(self._settings)
        self._contexts.append(context)
        return context

    def new_page(self, *args: Any, **kwargs: Any) -> PageStub:
        return self.new_context().new_page()

    def close(self) -> None:
        for context in self._contexts:
            context.close()
        self._contexts.clear()


class BrowserTypeStub:
    def __init__(self, name: str, settings: Settings) -> None:
        self.name = name
        self._settings = settings

    def launch(self, *args: Any, **kwargs: Any) -> BrowserStub:
        return BrowserStub(self._settings)


class PlaywrightStub:
    """Exposes the browser types the tests launch."""

    def __init__(self, settings: Settings) -> None:
        self.chromium = BrowserTypeStub("chromium", settings)
        self.firefox = BrowserTypeStub("firefox", settings)
        self.webkit = BrowserTypeStub("webkit", settings)

    def stop(self) -> None:
        return None


class SyncPlaywrightContext(AbstractContextManager):
    def __init__(self, settings: Settings | None = None) -> None:
        self._playwright = PlaywrightStub(settings or load_settings())

    def __enter__(self) -> PlaywrightStub:
        return self._playwright

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self._playwright.stop()
        return None


def sync_playwright(settings: Settings | None = None) -> SyncPlaywrightContext:
    """Return a context manager compatible with Playwright's ``sync_playwright``."""
    return SyncPlaywrightContext(settings)


__all__ = ["Error", "TimeoutError", "sync_playwright"]
