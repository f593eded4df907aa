"""Smoke test: health checks plus one unmute flow through the stub page."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from browser.sync_api import sync_playwright
from main import run_startup_health_checks


def run_unmute_flow() -> dict[str, object]:
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch()
        page = browser.new_context().new_page()
        page.goto("AI/index.html")
        page.wait_for_selector("#mute-indicator")
        page.dispatch_event("body", "click")
        page.wait_for_function("() => window.__testState.recognitionStartCalls > 0", timeout=1000)
        result = {
            "indicator_text": page.text_content("#mute-indicator .indicator-text"),
            "listening": page.evaluate(
                """() => document.querySelector('[data-role="user"]').classList.contains('is-listening')"""
            ),
        }
        browser.close()
    return result


if __name__ == "__main__":
    ok, details = run_startup_health_checks()
    print(details)
    if not ok:
        raise SystemExit(1)
    flow = run_unmute_flow()
    print(flow)
    raise SystemExit(0 if flow["listening"] is True else 1)
